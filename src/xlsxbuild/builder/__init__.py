from .cell import build_cell
from .context import SpecBuilderContext
from .row import RowScope
from .scope import BaseScope
from .sheet import SheetScope
from .workbook import WorkbookScope, workbook

__all__ = [
    "build_cell",
    "SpecBuilderContext",
    "RowScope",
    "BaseScope",
    "SheetScope",
    "WorkbookScope",
    "workbook",
]
