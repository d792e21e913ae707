# Cell-level format and font property sets, handed to the engine's style factory.

from dataclasses import dataclass, fields, replace
from typing import Any

_TUP_FONT_KEYS = (
    "font_name",
    "font_size",
    "font_color",
    "bold",
    "italic",
    "underline",
    "font_strikeout",
    "font_script",
)


@dataclass(frozen=True, slots=True)
class SpecCellFont:
    font_name: str | None = None
    font_size: float | None = None
    font_color: str | None = None
    bold: bool | None = None
    italic: bool | None = None
    underline: int | None = None  # 1 single, 2 double, 33/34 accounting
    font_strikeout: bool | None = None
    font_script: int | None = None  # 1 superscript, 2 subscript

    def with_(self, **kwargs: Any) -> "SpecCellFont":
        return replace(self, **kwargs)


@dataclass(frozen=True, slots=True)
class SpecCellFormat:
    # Field names follow XlsxWriter format property keys.
    font_name: str | None = None
    font_size: float | None = None
    font_color: str | None = None
    bold: bool | None = None
    italic: bool | None = None
    underline: int | None = None
    font_strikeout: bool | None = None
    font_script: int | None = None

    align: str | None = None
    valign: str | None = None
    text_wrap: bool | None = None
    indent: int | None = None
    rotation: int | None = None

    border: int | None = None
    top: int | None = None
    bottom: int | None = None
    left: int | None = None
    right: int | None = None
    border_color: str | None = None

    num_format: str | None = None
    bg_color: str | None = None
    fg_color: str | None = None
    pattern: int | None = None

    locked: bool | None = None
    hidden: bool | None = None

    def with_(self, **kwargs: Any) -> "SpecCellFormat":
        return replace(self, **kwargs)

    def with_font(self, font: SpecCellFont) -> "SpecCellFormat":
        """Fold the non-None properties of ``font`` into this format."""
        dict_font = {
            k: getattr(font, k) for k in _TUP_FONT_KEYS if getattr(font, k) is not None
        }
        return replace(self, **dict_font) if dict_font else self

    def merge(self, other: "SpecCellFormat") -> "SpecCellFormat":
        # right-hand non-None values win
        data = {
            _f.name: (
                getattr(other, _f.name)
                if getattr(other, _f.name) is not None
                else getattr(self, _f.name)
            )
            for _f in fields(self)
        }
        return SpecCellFormat(**data)

    def to_xlsxwriter(self) -> dict[str, Any]:
        return {
            _f.name: getattr(self, _f.name)
            for _f in fields(self)
            if getattr(self, _f.name) is not None
        }
