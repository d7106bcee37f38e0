from dataclasses import replace

import pytest

from dxfsections.layer import Layer, parse_layer, parse_layer_table
from dxfsections.tags import InvalidTableError, Tag, TagTypeError


def dxf_tags(text):
    lines = text.splitlines()
    return [Tag(int(code), value.strip()) for code, value in zip(lines[0::2], lines[1::2])]


def layer_from(fragment):
    return parse_layer(dxf_tags(fragment))


DXF_LAYER = """  2
VIEW_PORT
  70
5
  62
10
  6
CONTINUOUS
"""

SAMPLE_LAYER_TABLE = """  0
TABLE
  2
LAYER
 70
3
  0
LAYER
  2
0
 70
0
 62
7
  6
CONTINUOUS
  0
LAYER
  2
VIEW_PORT
 70
5
 62
-3
  6
DASHED
  0
ENDTAB
"""

INVALID_TABLE_TAGS = """  0
TABLE
  2
LAYER
  0
LAYER
  20
1.1
"""


def test_layer():
    layer = layer_from(DXF_LAYER)
    assert layer.name == "VIEW_PORT"
    assert layer.locked
    assert layer.frozen
    assert layer.on
    assert layer.color == 10
    assert layer.line_type == "CONTINUOUS"


def test_layer_default_values():
    layer = layer_from("")
    assert layer.name == ""
    assert not layer.locked
    assert not layer.frozen
    assert layer.on
    assert layer.color == 7
    assert layer.line_type == ""


def test_locked_layer():
    layer = layer_from("  70\n4")
    assert layer.locked
    assert not layer.frozen


def test_frozen_layer():
    layer = layer_from("  70\n1")
    assert layer.frozen
    assert not layer.locked


def test_off_layer():
    layer = layer_from("  62\n-4")
    assert not layer.on
    assert layer.color == 4


def test_new_layer_table():
    expected = {
        "0": Layer(name="0", color=7, line_type="CONTINUOUS", locked=False, frozen=False, on=True),
        "VIEW_PORT": Layer(
            name="VIEW_PORT", color=3, line_type="DASHED", locked=True, frozen=True, on=False
        ),
    }
    assert parse_layer_table(dxf_tags(SAMPLE_LAYER_TABLE)) == expected


def test_new_layer_table_invalid_table():
    with pytest.raises(InvalidTableError) as exc:
        parse_layer_table(dxf_tags(INVALID_TABLE_TAGS))
    assert str(exc.value) == "Invalid table. Missing TABLE AND/OR ENDTAB tags."


def test_new_layer_table_wrong_tag_type():
    tags = dxf_tags(SAMPLE_LAYER_TABLE)
    tags[6] = replace(tags[6], value="im an int ;-)")
    with pytest.raises(TagTypeError) as exc:
        parse_layer_table(tags)
    assert str(exc.value) == "Error parsing type of 'im an int ;-)' as an Integer"


def test_compare_layer_wrong_type():
    layer = layer_from(DXF_LAYER)
    assert layer == layer_from(DXF_LAYER)
    assert (layer == "str") is False