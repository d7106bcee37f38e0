"""LTYPE table entries."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from dxfsections.tags import Tag, as_float, as_int, as_str, table_entry_tags

log = logging.getLogger(__name__)

_ABS_ROTATION_BIT = 0x1
_TEXT_STRING_BIT = 0x2
_ELEMENT_SHAPE_BIT = 0x4


def _close(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=1e-9, abs_tol=1e-9)


@dataclass(eq=False)
class LineElement:
    """One dash, gap, text or shape element of a line type pattern."""

    length: float = 0.0
    absolute_rotation: bool = False
    is_text_string: bool = False
    is_shape: bool = False
    shape_number: int = 0
    scale: float = 1.0
    rotation_angle: float = 0.0
    x_offset: float = 0.0
    y_offset: float = 0.0
    text: str = ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineElement):
            return NotImplemented
        return (
            _close(self.length, other.length)
            and self.absolute_rotation == other.absolute_rotation
            and self.is_text_string == other.is_text_string
            and self.is_shape == other.is_shape
            and self.shape_number == other.shape_number
            and _close(self.scale, other.scale)
            and _close(self.rotation_angle, other.rotation_angle)
            and _close(self.x_offset, other.x_offset)
            and _close(self.y_offset, other.y_offset)
            and self.text == other.text
        )


@dataclass(eq=False)
class LineType:
    """A line type definition with its pattern."""

    name: str = ""
    description: str = ""
    length: float = 0.0
    pattern: list[LineElement] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineType):
            return NotImplemented
        return (
            self.name == other.name
            and self.description == other.description
            and _close(self.length, other.length)
            and len(self.pattern) == len(other.pattern)
            and all(a == b for a, b in zip(self.pattern, other.pattern))
        )


def _current(element: LineElement | None, tag: Tag) -> LineElement:
    if element is None:
        raise ValueError(
            f"Line type tag {tag.code} appears before any pattern element (code 49)"
        )
    return element


def parse_line_type(tags: Iterable[Tag]) -> LineType:
    """Build a LineType from the tags of one LTYPE entry."""
    ltype = LineType()
    element: LineElement | None = None
    flags74 = 0

    for tag in tags:
        match tag.code:
            case 2:
                ltype.name = as_str(tag)
            case 3:
                ltype.description = as_str(tag)
            case 40:
                ltype.length = as_float(tag)
            case 49:
                length = as_float(tag)
                if element is not None:
                    ltype.pattern.append(element)
                element = LineElement(length=length, scale=1.0)
            case 74:
                flags74 = as_int(tag)
                if flags74 > 0:
                    current = _current(element, tag)
                    current.absolute_rotation = bool(flags74 & _ABS_ROTATION_BIT)
                    current.is_text_string = bool(flags74 & _TEXT_STRING_BIT)
                    current.is_shape = bool(flags74 & _ELEMENT_SHAPE_BIT)
            case 75:
                flags = as_int(tag)
                if flags74 == 0:
                    log.warning("there should be no 75 code tag if 74 value is 0")
                else:
                    current = _current(element, tag)
                    if current.is_text_string and flags != 0:
                        log.warning("tag 75 should be 0 if 74 is a text string")
                    elif current.is_shape:
                        current.shape_number = flags
            case 46:
                _current(element, tag).scale = as_float(tag)
            case 50:
                _current(element, tag).rotation_angle = as_float(tag)
            case 44:
                _current(element, tag).x_offset = as_float(tag)
            case 45:
                _current(element, tag).y_offset = as_float(tag)
            case 9:
                _current(element, tag).text = as_str(tag)

    if element is not None:
        ltype.pattern.append(element)
    return ltype


def parse_line_type_table(tags: Iterable[Tag]) -> dict[str, LineType]:
    """Parse an LTYPE table into a mapping of line type name to LineType."""
    ltypes = (parse_line_type(entry) for entry in table_entry_tags(tags))
    return {ltype.name: ltype for ltype in ltypes}