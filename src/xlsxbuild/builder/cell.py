from typing import Any

from ..spec import CellContent
from ..util import resolve_cell_content
from .context import SpecBuilderContext


def build_cell(
    ctx: SpecBuilderContext,
    *,
    row: Any,
    index: int,
    content: Any = None,
    style: Any | None = None,
) -> CellContent:
    """Create the cell at ``index`` of ``row``, write ``content`` and style it.

    The effective style is ``style`` when given, else the style carried by
    ``ctx``; with neither, the engine's default formatting applies.
    """
    engine = ctx.engine
    cell = engine.create_cell(row, index)
    content_resolved = resolve_cell_content(content, policy=ctx.content_policy)
    content_resolved.write_to(engine, cell)

    style_effective = ctx.inherit(style).style
    if style_effective is not None:
        engine.set_cell_style(cell, style_effective)
    return content_resolved
