from dataclasses import dataclass, replace
from typing import Any

from ..conf import DEFAULT_CONTENT_POLICY
from ..engine import SpreadsheetEngine
from ..spec import SpecContentPolicy


@dataclass(frozen=True, slots=True)
class SpecBuilderContext:
    """State every scope hands down to the scopes it creates."""

    engine: SpreadsheetEngine
    style: Any | None = None
    content_policy: SpecContentPolicy = DEFAULT_CONTENT_POLICY

    def inherit(self, style: Any | None = None) -> "SpecBuilderContext":
        # explicit style wins, otherwise the enclosing one carries over
        return self if style is None else replace(self, style=style)
