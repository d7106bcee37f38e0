"""The TABLES section: layer, style and line type tables."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from dxfsections.layer import Layer, parse_layer_table
from dxfsections.linetype import LineType, parse_line_type_table
from dxfsections.style import Style, parse_style_table
from dxfsections.tags import Tag, split_tag_chunks, table_entry_tags

_END_OF_SECTION = Tag(0, "ENDSEC")
_END_OF_TABLE = Tag(0, "ENDTAB")


@dataclass
class TablesSection:
    """The tables of a drawing, each mapping an entry name to its definition."""

    layers: dict[str, Layer] = field(default_factory=dict)
    styles: dict[str, Style] = field(default_factory=dict)
    line_types: dict[str, LineType] = field(default_factory=dict)


def _table_parsers(
    section: TablesSection,
) -> dict[str, Callable[[list[Tag]], None]]:
    def layers(chunk: list[Tag]) -> None:
        section.layers = parse_layer_table(chunk)

    def styles(chunk: list[Tag]) -> None:
        section.styles = parse_style_table(chunk)

    def line_types(chunk: list[Tag]) -> None:
        section.line_types = parse_line_type_table(chunk)

    return {"LAYER": layers, "STYLE": styles, "LTYPE": line_types}


def parse_tables_section(tags: Iterable[Tag]) -> TablesSection:
    """Build a TablesSection from the tags of a whole TABLES section.

    Tables of unknown types are ignored. Raises InvalidTableError when a
    table is not closed by ENDTAB, and TagTypeError on badly typed values.
    """
    section = TablesSection()
    parsers = _table_parsers(section)

    # Skip (0, SECTION) and (2, TABLES).
    body = list(tags)[2:]
    for chunk in split_tag_chunks(body, _END_OF_SECTION, _END_OF_TABLE):
        entry_types = dict.fromkeys(
            str(entry[0].value) for entry in table_entry_tags(chunk)
        )
        for table_type in entry_types:
            parser = parsers.get(table_type)
            if parser is not None:
                parser(chunk)

    return section