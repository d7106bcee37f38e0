"""STYLE table entries."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from dxfsections.tags import Tag, as_float, as_int, as_str, table_entry_tags

_SHAPE_BIT = 0x1
_VERTICAL_TEXT_BIT = 0x4
_BACKWARDS_BIT = 0x2
_UPSIDE_DOWN_BIT = 0x4


def _close(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=1e-9, abs_tol=1e-9)


@dataclass(eq=False)
class Style:
    """A text style definition."""

    name: str = ""
    height: float = 1.0
    width: float = 1.0
    oblique: float = 0.0
    is_backwards: bool = False
    is_upside_down: bool = False
    is_shape: bool = False
    is_vertical_text: bool = False
    font: str = ""
    big_font: str = ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Style):
            return NotImplemented
        return (
            self.name == other.name
            and _close(self.height, other.height)
            and _close(self.width, other.width)
            and _close(self.oblique, other.oblique)
            and self.is_backwards == other.is_backwards
            and self.is_upside_down == other.is_upside_down
            and self.is_shape == other.is_shape
            and self.is_vertical_text == other.is_vertical_text
            and self.font == other.font
            and self.big_font == other.big_font
        )


def parse_style(tags: Iterable[Tag]) -> Style:
    """Build a Style from the tags of one STYLE entry."""
    style = Style()
    for tag in tags:
        match tag.code:
            case 2:
                style.name = as_str(tag)
            case 3:
                style.font = as_str(tag)
            case 4:
                style.big_font = as_str(tag)
            case 40:
                style.height = as_float(tag)
            case 41:
                style.width = as_float(tag)
            case 50:
                style.oblique = as_float(tag)
            case 70:
                flags = as_int(tag)
                style.is_shape = bool(flags & _SHAPE_BIT)
                style.is_vertical_text = bool(flags & _VERTICAL_TEXT_BIT)
            case 71:
                flags = as_int(tag)
                style.is_backwards = bool(flags & _BACKWARDS_BIT)
                style.is_upside_down = bool(flags & _UPSIDE_DOWN_BIT)
    return style


def parse_style_table(tags: Iterable[Tag]) -> dict[str, Style]:
    """Parse a STYLE table into a mapping of style name to Style."""
    styles = (parse_style(entry) for entry in table_entry_tags(tags))
    return {style.name: style for style in styles}