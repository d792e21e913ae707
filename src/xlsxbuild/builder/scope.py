from collections.abc import Callable
from typing import Any

from ..engine import SpreadsheetEngine
from ..spec import SpecCellFont, SpecCellFormat
from .context import SpecBuilderContext


class BaseScope:
    """Common base of all builder scopes: engine access plus style/font factories."""

    __slots__ = ("_ctx",)

    def __init__(self, ctx: SpecBuilderContext):
        self._ctx = ctx

    @property
    def engine(self) -> SpreadsheetEngine:
        return self._ctx.engine

    @property
    def style(self) -> Any | None:
        """Style applied to cells created below this scope unless overridden."""
        return self._ctx.style

    def create_cell_style(
        self,
        spec: SpecCellFormat | None = None,
        *,
        font: SpecCellFont | None = None,
        configure: Callable[[Any], None] | None = None,
        **kwargs: Any,
    ) -> Any:
        """
        Create an engine style from format properties.

        Args:
            spec (SpecCellFormat | None, optional): Base format. Defaults to an empty format.
            font (SpecCellFont | None, optional): Font properties folded into the format.
            configure (Callable | None, optional): Receives the created engine style for
                further in-place changes. Such styles are never shared.
            **kwargs: Format properties (XlsxWriter keys) overriding ``spec``.

        Returns:
            Any: The engine style handle, usable as ``style=`` anywhere.
        """
        spec_fmt = SpecCellFormat() if spec is None else spec
        if kwargs:
            spec_fmt = spec_fmt.with_(**kwargs)
        if font is not None:
            spec_fmt = spec_fmt.with_font(font)
        return self.engine.create_style(spec_fmt, configure=configure)

    def create_font(self, spec: SpecCellFont | None = None, **kwargs: Any) -> SpecCellFont:
        return self.engine.create_font(spec, **kwargs)
