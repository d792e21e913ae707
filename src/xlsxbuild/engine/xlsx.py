import io
import os
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from functools import partial
from pathlib import Path
from types import TracebackType
from typing import IO, Any

import xlsxwriter
import xlsxwriter.format
import xlsxwriter.worksheet
from loguru import logger

from ..conf import DEFAULT_XLSX_ENGINE_OPTIONS, N_NCOLS_EXCEL_MAX, N_NROWS_EXCEL_MAX
from ..spec import (
    SpecCellFont,
    SpecCellFormat,
    SpecSheetSummary,
    SpecXlsxBuildReport,
    SpecXlsxEngineOptions,
)
from ..util import create_unique_sheet_name, sanitize_sheet_name


@dataclass(slots=True)
class XlsxSheetRef:
    worksheet: xlsxwriter.worksheet.Worksheet
    summary: SpecSheetSummary


@dataclass(frozen=True, slots=True)
class XlsxRowRef:
    sheet: XlsxSheetRef
    row_idx: int


@dataclass(slots=True)
class XlsxCellRef:
    """
    Pending state of one worksheet cell.

    XlsxWriter takes value and format in a single ``write_*`` call, so the last
    value writer and the current format are kept here and replayed together
    whenever either one changes.
    """

    row: XlsxRowRef
    col_idx: int
    fn_write: Callable[..., int] | None = None
    fmt: xlsxwriter.format.Format | None = None

    @property
    def worksheet(self) -> xlsxwriter.worksheet.Worksheet:
        return self.row.sheet.worksheet

    def flush(self) -> None:
        if self.fn_write is not None:
            self.fn_write(cell_format=self.fmt)


class XlsxEngine:
    """
    Spreadsheet engine backed by :class:`xlsxwriter.Workbook`.

    The workbook is buffered in memory while the builder populates it and is
    serialized by :meth:`write`. Sheets, rows and cells are created through the
    ``create_*`` methods and filled with the ``set_cell_*`` methods; styles are
    XlsxWriter formats, created from :class:`SpecCellFormat` and cached per
    spec::

        from xlsxbuild import XlsxEngine, workbook

        with XlsxEngine() as engine:
            workbook(lambda wb: wb.sheet(build_people), engine=engine)
            engine.write("people.xlsx")

    Parameters
    ----------
    options:
        Workbook-level switches (NaN/Inf handling, default date format,
        sheet-name policy). See :class:`SpecXlsxEngineOptions`.
    """

    def __init__(self, *, options: SpecXlsxEngineOptions | None = None):
        self.options = DEFAULT_XLSX_ENGINE_OPTIONS if options is None else options
        self._buffer = io.BytesIO()
        self.wb = xlsxwriter.Workbook(self._buffer, self.options.to_xlsxwriter())
        self._format_cache: dict[SpecCellFormat, xlsxwriter.format.Format] = {}
        self._sheet_names: list[str] = []
        self._report = SpecXlsxBuildReport()
        self._if_closed = False

    def __enter__(self) -> "XlsxEngine":
        return self

    def __exit__(
        self, exc_type: type | None, exc: BaseException | None, tb: TracebackType | None
    ) -> None:
        self.close()

    @property
    def is_closed(self) -> bool:
        return self._if_closed

    def report(self) -> SpecXlsxBuildReport:
        return self._report

    def _check_open(self) -> None:
        if self.is_closed:
            raise RuntimeError("Workbook already written; no further changes can be made.")

    ############################################################################
    # #region Nodes
    def _derive_sheet_name(self, name: str | None) -> str | None:
        if self.options.sheet_name_policy == "strict":
            return name
        if name is None:
            # pick the auto name here so it cannot clash with an explicit one
            return create_unique_sheet_name(
                f"Sheet{len(self._sheet_names) + 1}", self._sheet_names
            )

        c_name = create_unique_sheet_name(sanitize_sheet_name(name), self._sheet_names)
        if c_name != name:
            c_msg = f"Sheet name {name!r} is not usable as-is; renamed to {c_name!r}."
            logger.warning(c_msg)
            self._report.warn(c_msg)
        return c_name

    def create_sheet(self, name: str | None = None) -> XlsxSheetRef:
        self._check_open()
        ws = self.wb.add_worksheet(self._derive_sheet_name(name))
        self._sheet_names.append(ws.get_name())

        summary = SpecSheetSummary(sheet_name=ws.get_name())
        self._report.sheets.append(summary)
        logger.debug(f"Sheet created: {summary.sheet_name!r}")
        return XlsxSheetRef(worksheet=ws, summary=summary)

    def create_row(self, sheet: XlsxSheetRef, index: int) -> XlsxRowRef:
        self._check_open()
        if not 0 <= index < N_NROWS_EXCEL_MAX:
            raise ValueError(
                f"Row index {index} is outside the Excel grid (0..{N_NROWS_EXCEL_MAX - 1})."
            )
        # registers the row so it is emitted even when no cell is ever written
        sheet.worksheet.set_row(index, None)
        sheet.summary.n_rows += 1
        return XlsxRowRef(sheet=sheet, row_idx=index)

    def create_cell(self, row: XlsxRowRef, index: int) -> XlsxCellRef:
        self._check_open()
        if not 0 <= index < N_NCOLS_EXCEL_MAX:
            raise ValueError(
                f"Cell index {index} is outside the Excel grid (0..{N_NCOLS_EXCEL_MAX - 1})."
            )
        row.sheet.summary.n_cells += 1
        return XlsxCellRef(row=row, col_idx=index)

    # #endregion
    ############################################################################
    # #region CellValues
    def _set_writer(self, cell: XlsxCellRef, method: Callable[..., int], value: Any) -> None:
        self._check_open()
        cell.fn_write = partial(method, cell.row.row_idx, cell.col_idx, value)
        cell.flush()

    def set_cell_blank(self, cell: XlsxCellRef) -> None:
        # XlsxWriter drops blank cells until they carry a format
        self._set_writer(cell, cell.worksheet.write_blank, None)

    def set_cell_formula(self, cell: XlsxCellRef, text: str) -> None:
        self._set_writer(cell, cell.worksheet.write_formula, text)

    def set_cell_boolean(self, cell: XlsxCellRef, value: bool) -> None:
        self._set_writer(cell, cell.worksheet.write_boolean, value)

    def set_cell_number(self, cell: XlsxCellRef, value: float) -> None:
        self._set_writer(cell, cell.worksheet.write_number, value)

    def set_cell_datetime(self, cell: XlsxCellRef, value: datetime) -> None:
        self._set_writer(cell, cell.worksheet.write_datetime, value)

    def set_cell_text(self, cell: XlsxCellRef, text: str) -> None:
        self._set_writer(cell, cell.worksheet.write_string, text)

    # #endregion
    ############################################################################
    # #region Styles
    def _create_format_cached(self, spec: SpecCellFormat) -> xlsxwriter.format.Format:
        fmt = self._format_cache.get(spec)
        if fmt is None:
            fmt = self.wb.add_format(spec.to_xlsxwriter())
            self._format_cache[spec] = fmt
        return fmt

    def create_style(
        self,
        spec: SpecCellFormat | None = None,
        configure: Callable[[xlsxwriter.format.Format], None] | None = None,
    ) -> xlsxwriter.format.Format:
        spec_fmt = SpecCellFormat() if spec is None else spec
        if configure is None:
            return self._create_format_cached(spec_fmt)

        # configured formats are mutated by the caller, never shared
        fmt = self.wb.add_format(spec_fmt.to_xlsxwriter())
        configure(fmt)
        return fmt

    def create_font(self, spec: SpecCellFont | None = None, **kwargs: Any) -> SpecCellFont:
        spec_font = SpecCellFont() if spec is None else spec
        return spec_font.with_(**kwargs) if kwargs else spec_font

    def set_cell_style(self, cell: XlsxCellRef, style: Any) -> None:
        self._check_open()
        if isinstance(style, SpecCellFormat):
            style = self._create_format_cached(style)
        elif not isinstance(style, xlsxwriter.format.Format):
            raise TypeError(
                "Cell style must be a SpecCellFormat or an xlsxwriter Format, "
                f"got {type(style).__name__}."
            )
        cell.fmt = style
        cell.flush()

    # #endregion
    ############################################################################
    # #region Output
    def close(self) -> None:
        if self.is_closed:
            return
        self.wb.close()
        self._if_closed = True

    def to_bytes(self) -> bytes:
        self.close()
        return self._buffer.getvalue()

    def write(self, destination: os.PathLike[str] | str | IO[bytes]) -> None:
        v_bytes = self.to_bytes()
        if isinstance(destination, (str, os.PathLike)):
            Path(destination).write_bytes(v_bytes)
            c_target = Path(destination).as_posix()
        else:
            destination.write(v_bytes)
            c_target = type(destination).__name__
        logger.debug(
            f"Workbook written to {c_target}: {len(self._report.sheets)} sheet(s), "
            f"{sum(_s.n_rows for _s in self._report.sheets)} row(s), "
            f"{self._report.n_cells} cell(s)"
        )

    # #endregion
    ############################################################################
