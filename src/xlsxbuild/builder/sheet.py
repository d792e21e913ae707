from collections.abc import Callable, Iterable
from typing import Any

from .._optional_deps import import_optional_module
from .context import SpecBuilderContext
from .row import RowScope
from .scope import BaseScope


class SheetScope(BaseScope):
    """One worksheet; rows are appended top to bottom from row 0."""

    __slots__ = ("handle", "_row_idx_next")

    def __init__(self, ctx: SpecBuilderContext, *, handle: Any):
        super().__init__(ctx)
        self.handle = handle
        self._row_idx_next = 0

    def row(
        self,
        configure: Callable[[RowScope], Any] | None = None,
        *,
        style: Any | None = None,
    ) -> RowScope:
        """
        Append a row and optionally fill it through ``configure``.

        The row index is taken on every call, so a row created without
        ``configure`` still occupies its position as an empty row.
        """
        n_row_idx = self._row_idx_next
        self._row_idx_next += 1
        handle_row = self.engine.create_row(self.handle, n_row_idx)

        row = RowScope(self._ctx.inherit(style), handle=handle_row, index=n_row_idx)
        if configure is not None:
            configure(row)
        return row

    def rows(
        self, records: Iterable[Iterable[Any]], *, style: Any | None = None
    ) -> int:
        n_rows = 0
        for _record in records:
            self.row(style=style).cells(_record)
            n_rows += 1
        return n_rows

    def frame(
        self,
        df: Any,
        *,
        if_write_header: bool = True,
        header_style: Any | None = None,
        style: Any | None = None,
    ) -> int:
        """
        Append a table: a header row of column names, then one row per record.

        Args:
            df (Any): A ``polars.DataFrame`` or anything ``polars.DataFrame()`` accepts.
            if_write_header (bool, optional): Write column names first. Defaults to True.
            header_style (Any | None, optional): Style of the header row.
            style (Any | None, optional): Style of the data rows.

        Returns:
            int: Number of rows appended, header included.
        """
        mod_df = import_optional_module(
            module_name="xlsxbuild.util.dataframe",
            feature="xlsxbuild SheetScope.frame",
            extras=("polars",),
            required_modules=("polars",),
        )
        df_pl = mod_df.convert_to_polars(df)

        n_rows = 0
        if if_write_header:
            self.row(style=header_style).cells(df_pl.columns)
            n_rows += 1
        n_rows += self.rows(mod_df.iter_frame_records(df_pl), style=style)
        return n_rows
