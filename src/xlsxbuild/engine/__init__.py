from .base import SpreadsheetEngine
from .xlsx import XlsxCellRef, XlsxEngine, XlsxRowRef, XlsxSheetRef

__all__ = [
    "SpreadsheetEngine",
    "XlsxCellRef",
    "XlsxEngine",
    "XlsxRowRef",
    "XlsxSheetRef",
]
