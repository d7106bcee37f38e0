"""LAYER table entries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from dxfsections.tags import Tag, as_int, as_str, table_entry_tags

_FROZEN_BIT = 0x1
_LOCK_BIT = 0x4


@dataclass
class Layer:
    """A layer definition."""

    name: str = ""
    color: int = 7
    line_type: str = ""
    locked: bool = False
    frozen: bool = False
    on: bool = True


def parse_layer(tags: Iterable[Tag]) -> Layer:
    """Build a Layer from the tags of one LAYER entry."""
    layer = Layer()
    for tag in tags:
        match tag.code:
            case 2:
                layer.name = as_str(tag)
            case 6:
                layer.line_type = as_str(tag)
            case 70:
                flags = as_int(tag)
                layer.frozen = bool(flags & _FROZEN_BIT)
                layer.locked = bool(flags & _LOCK_BIT)
            case 62:
                color = as_int(tag)
                if color < 0:
                    layer.on = False
                    layer.color = -color
                else:
                    layer.color = color
    return layer


def parse_layer_table(tags: Iterable[Tag]) -> dict[str, Layer]:
    """Parse a LAYER table into a mapping of layer name to Layer."""
    layers = (parse_layer(entry) for entry in table_entry_tags(tags))
    return {layer.name: layer for layer in layers}