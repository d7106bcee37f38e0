# dxfsections

`dxfsections` turns the HEADER and TABLES sections of a DXF drawing into
plain Python objects: header variables, layers, text styles and line types.

It works on tags, the group-code/value pairs of the DXF format, that have
already been read from a drawing.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Tags (`dxfsections.tags`)

`Tag(code, value)` is a frozen dataclass holding an integer group code and a
value (`str`, `int` or `float`). Tags compare equal when code and value are
equal.

- `tag_groups(tags, code)` splits tags into groups, each starting at a tag
  with the given code. Tags before the first such tag form a group of their
  own.
- `table_entry_tags(tags)` checks that the tags start with a `(0, "TABLE")`
  group and end with a `(0, "ENDTAB")` group, and returns the groups in
  between. Otherwise (including for no tags at all) it raises
  `InvalidTableError` with the message
  `Invalid table. Missing TABLE AND/OR ENDTAB tags.`
- `split_tag_chunks(tags, stop_tag, chunk_delimiter)` cuts tags into chunks,
  each ending with (and including) the delimiter tag. Splitting ends at the
  stop tag, which is left out of every chunk.
- `as_int(tag)`, `as_float(tag)` and `as_str(tag)` read a tag's value as that
  type. `as_int` and `as_float` also accept strings that hold a number;
  `as_float` accepts integers. A value that cannot be read raises
  `TagTypeError`, a subclass of `ValueError`.

## Header (`dxfsections.header`)

```python
from dxfsections.header import parse_header
from dxfsections.tags import Tag

tags = [
    Tag(0, "SECTION"), Tag(2, "HEADER"),
    Tag(9, "$INSBASE"), Tag(10, 0.1), Tag(20, 22.0), Tag(30, 53.5),
    Tag(0, "ENDSEC"),
]
header = parse_header(tags)
header.get("$INSBASE")      # [Tag(10, 0.1), Tag(20, 22.0), Tag(30, 53.5)]
header.get("$ACADVER")      # [Tag(1, "AC1009")] when not given
header.get("$DWGCODEPAGE")  # [Tag(3, "ANSI_1252")] when not given
header.get("MISSING")       # []
```

`parse_header` takes the tags of a whole section, including the opening
`SECTION`/`HEADER` tags and the closing `ENDSEC` tag. Each variable starts
at a tag with code 9; if a variable name appears more than once, its tags
are joined into one list. `HeaderSection.values` holds the full mapping, and
`HeaderSection.get` returns a copy of one entry.

## Tables

```python
from dxfsections.tables import parse_tables_section

section = parse_tables_section(tags)
section.layers["0"].color
section.styles["STANDARD"].height
section.line_types["DASHED"].pattern
```

`parse_tables_section` takes the tags of a whole TABLES section. It skips the
first two tags (`SECTION`, `TABLES`), splits the rest into `TABLE` ...
`ENDTAB` chunks up to `ENDSEC`, and parses LAYER, STYLE and LTYPE tables.
Tables of other types are ignored. The result is a `TablesSection` with the
dictionaries `layers`, `styles` and `line_types`, each keyed by entry name.

A single table can also be parsed on its own, from its `TABLE` ... `ENDTAB`
tags, and a single entry from its own tags:

- `dxfsections.layer`: `parse_layer_table`, `parse_layer` →
  `Layer(name, color, line_type, locked, frozen, on)`. Colour defaults to 7;
  a negative colour switches the layer off and keeps its absolute value.
  Code 70 bit 1 sets `frozen`, bit 4 sets `locked`.
- `dxfsections.style`: `parse_style_table`, `parse_style` →
  `Style(name, height, width, oblique, is_backwards, is_upside_down,
  is_shape, is_vertical_text, font, big_font)`. Height and width default
  to 1.0. Floats are compared with a small tolerance.
- `dxfsections.linetype`: `parse_line_type_table`, `parse_line_type` →
  `LineType(name, description, length, pattern)`, where `pattern` is a list
  of `LineElement(length, absolute_rotation, is_text_string, is_shape,
  shape_number, scale, rotation_angle, x_offset, y_offset, text)`. Each code
  49 tag starts a new element. A shape number (code 75) is kept only for
  shape elements; a code 75 tag with no code 74 flags, or a non-zero one on a
  text element, is logged as a warning on the `dxfsections.linetype` logger.
  Element tags that come before any code 49 tag raise `ValueError`.

## Errors

- `TagTypeError`: a tag value has the wrong type for its group code.
- `InvalidTableError`: a table lacks its `TABLE` or `ENDTAB` markers.

## What it does not do

The package does not read DXF files or streams into tags; build the `Tag`
lists yourself or with another reader. It parses only the HEADER and TABLES
sections, and within TABLES only LAYER, STYLE and LTYPE tables. It does not
write DXF.