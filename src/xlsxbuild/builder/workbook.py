from collections.abc import Callable
from typing import Any

from ..conf import DEFAULT_CONTENT_POLICY
from ..engine import SpreadsheetEngine, XlsxEngine
from ..spec import SpecContentPolicy, SpecXlsxEngineOptions
from .context import SpecBuilderContext
from .scope import BaseScope
from .sheet import SheetScope


class WorkbookScope(BaseScope):
    """Root scope; holds the workbook-wide default style."""

    __slots__ = ()

    def sheet(
        self,
        configure: Callable[[SheetScope], Any],
        *,
        name: str | None = None,
        style: Any | None = None,
    ) -> SheetScope:
        """Append a sheet (auto-named by the engine when ``name`` is None) and fill it."""
        handle_sheet = self.engine.create_sheet(name)
        sheet = SheetScope(self._ctx.inherit(style), handle=handle_sheet)
        configure(sheet)
        return sheet


def workbook(
    configure: Callable[[WorkbookScope], Any],
    *,
    style: Any | None = None,
    engine: SpreadsheetEngine | None = None,
    options: SpecXlsxEngineOptions | None = None,
    content_policy: SpecContentPolicy | None = None,
) -> Any:
    """
    Build a workbook and return the engine holding it.

    Args:
        configure (Callable[[WorkbookScope], Any]): Populates the workbook.
        style (Any | None, optional): Default style for every cell of the workbook.
        engine (SpreadsheetEngine | None, optional): Engine to build into.
            Defaults to a new :class:`XlsxEngine` created with ``options``.
        options (SpecXlsxEngineOptions | None, optional): Options of the default
            engine; rejected together with an explicit ``engine``.
        content_policy (SpecContentPolicy | None, optional): Content resolution
            settings (time zone of date values).

    Returns:
        Any: The engine; call ``write(destination)`` on it to serialize.

    Example::

        def build_people(sh):
            sh.row(lambda r: r.cells(["Name", "Age"]))
            sh.row(lambda r: r.cells(["Ada", 36]))

        workbook(lambda wb: wb.sheet(build_people)).write("people.xlsx")
    """
    if engine is None:
        engine = XlsxEngine(options=options)
    elif options is not None:
        raise ValueError(
            "`options` only applies to the default engine; got an explicit `engine` too."
        )

    ctx = SpecBuilderContext(
        engine=engine,
        style=style,
        content_policy=DEFAULT_CONTENT_POLICY if content_policy is None else content_policy,
    )
    configure(WorkbookScope(ctx))
    return engine
