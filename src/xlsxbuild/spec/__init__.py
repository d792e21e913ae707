from .cell import SpecCellFont, SpecCellFormat
from .content import (
    CellContent,
    ContentBlank,
    ContentBoolean,
    ContentDatetime,
    ContentFormula,
    ContentNumber,
    ContentText,
    Formula,
)
from .policy import SpecContentPolicy, SpecXlsxEngineOptions
from .report import SpecSheetSummary, SpecXlsxBuildReport

__all__ = [
    "SpecCellFont",
    "SpecCellFormat",
    "CellContent",
    "ContentBlank",
    "ContentBoolean",
    "ContentDatetime",
    "ContentFormula",
    "ContentNumber",
    "ContentText",
    "Formula",
    "SpecContentPolicy",
    "SpecXlsxEngineOptions",
    "SpecSheetSummary",
    "SpecXlsxBuildReport",
]
