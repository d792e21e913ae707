from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING, Any

__all__ = [
    "__version__",
    "workbook",
    "WorkbookScope",
    "SheetScope",
    "RowScope",
    "Formula",
    "XlsxEngine",
    "SpreadsheetEngine",
    "SpecCellFormat",
    "SpecCellFont",
    "SpecContentPolicy",
    "SpecXlsxEngineOptions",
]

try:
    __version__ = version("xlsxbuild")
except PackageNotFoundError:
    __version__ = "0.0.0"

if TYPE_CHECKING:
    from .builder import RowScope, SheetScope, WorkbookScope, workbook
    from .engine import SpreadsheetEngine, XlsxEngine
    from .spec import (
        Formula,
        SpecCellFont,
        SpecCellFormat,
        SpecContentPolicy,
        SpecXlsxEngineOptions,
    )

_ALIAS_ATTRS: dict[str, str] = {
    "workbook": "xlsxbuild.builder",
    "WorkbookScope": "xlsxbuild.builder",
    "SheetScope": "xlsxbuild.builder",
    "RowScope": "xlsxbuild.builder",
    "XlsxEngine": "xlsxbuild.engine",
    "SpreadsheetEngine": "xlsxbuild.engine",
    "Formula": "xlsxbuild.spec",
    "SpecCellFormat": "xlsxbuild.spec",
    "SpecCellFont": "xlsxbuild.spec",
    "SpecContentPolicy": "xlsxbuild.spec",
    "SpecXlsxEngineOptions": "xlsxbuild.spec",
}


def __getattr__(name: str) -> Any:
    module_name = _ALIAS_ATTRS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    attr_loaded = getattr(import_module(module_name), name)
    globals()[name] = attr_loaded
    return attr_loaded


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(__all__))
