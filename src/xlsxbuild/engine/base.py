from collections.abc import Callable
from datetime import datetime
from os import PathLike
from typing import IO, Any, Protocol

from ..spec import SpecCellFont, SpecCellFormat


class SpreadsheetEngine(Protocol):
    """
    Capabilities the builder scopes need from the document backend.

    The engine owns the real document: every ``create_*`` call allocates a node
    immediately, and node handles are opaque to the builder. Errors raised by an
    engine are never caught by the builder; they abort the current build.
    """

    def create_sheet(self, name: str | None = None) -> Any: ...

    def create_row(self, sheet: Any, index: int) -> Any: ...

    def create_cell(self, row: Any, index: int) -> Any: ...

    def set_cell_blank(self, cell: Any) -> None: ...

    def set_cell_formula(self, cell: Any, text: str) -> None: ...

    def set_cell_boolean(self, cell: Any, value: bool) -> None: ...

    def set_cell_number(self, cell: Any, value: float) -> None: ...

    def set_cell_datetime(self, cell: Any, value: datetime) -> None: ...

    def set_cell_text(self, cell: Any, text: str) -> None: ...

    def set_cell_style(self, cell: Any, style: Any) -> None: ...

    def create_style(
        self,
        spec: SpecCellFormat | None = None,
        configure: Callable[[Any], None] | None = None,
    ) -> Any: ...

    def create_font(
        self, spec: SpecCellFont | None = None, **kwargs: Any
    ) -> SpecCellFont: ...

    def write(self, destination: PathLike[str] | str | IO[bytes]) -> None: ...
