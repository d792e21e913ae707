from collections.abc import Iterable
from typing import Any

from .cell import build_cell
from .context import SpecBuilderContext
from .scope import BaseScope


class RowScope(BaseScope):
    """One worksheet row; cells are appended left to right from column 0."""

    __slots__ = ("handle", "index", "_cell_idx_next")

    def __init__(self, ctx: SpecBuilderContext, *, handle: Any, index: int):
        super().__init__(ctx)
        self.handle = handle
        self.index = index
        self._cell_idx_next = 0

    def cell(self, content: Any = None, style: Any | None = None) -> None:
        n_cell_idx = self._cell_idx_next
        self._cell_idx_next += 1
        build_cell(
            self._ctx,
            row=self.handle,
            index=n_cell_idx,
            content=content,
            style=style,
        )

    def cells(self, contents: Iterable[Any], *, style: Any | None = None) -> None:
        for _content in contents:
            self.cell(_content, style=style)
