from dataclasses import replace

import pytest

from dxfsections.style import Style, parse_style, parse_style_table
from dxfsections.tags import InvalidTableError, Tag, TagTypeError


def dxf_tags(text):
    lines = text.splitlines()
    return [Tag(int(code), value.strip()) for code, value in zip(lines[0::2], lines[1::2])]


def style_from(fragment):
    return parse_style(dxf_tags(fragment))


DXF_STYLE = """  2
STANDARD
 70
     5
 40
3.55
 41
1.1
 50
6.0
 71
     6
 42
0.2
  3
txt
  4
Arial.ttf
"""

DXF_STYLE_TABLE = """  0
TABLE
  2
STYLE
 70
2
  0
STYLE
  2
H_TEXT
  3
txt
  4
stxt
  0
STYLE
  2
V_TEXT
 70
4
 40
1.5
 41
2.3
 50
0.5
 71
6
  3
1
  4
2
  0
STYLE
  2
SHAPE
 70
1
 50
0.0
 71
0
  0
ENDTAB
"""

INVALID_STYLE_TABLE = """  0
TABLE
  2
STYLE
  0
STYLE
  20
1.1
"""


def test_style_default_values():
    style = style_from("")
    assert style.name == ""
    assert style.height == pytest.approx(1.0, abs=0.001)
    assert style.width == pytest.approx(1.0, abs=0.001)
    assert style.oblique == pytest.approx(0.0, abs=0.001)
    assert not style.is_backwards
    assert not style.is_upside_down
    assert not style.is_shape
    assert not style.is_vertical_text
    assert style.font == ""
    assert style.big_font == ""


def test_dxf_style():
    style = style_from(DXF_STYLE)
    assert style.name == "STANDARD"
    assert style.height == pytest.approx(3.55, abs=0.001)
    assert style.width == pytest.approx(1.1, abs=0.001)
    assert style.oblique == pytest.approx(6.0, abs=0.001)
    assert style.is_backwards
    assert style.is_upside_down
    assert style.is_shape
    assert style.is_vertical_text
    assert style.font == "txt"
    assert style.big_font == "Arial.ttf"


def test_new_style_table():
    expected = {
        "H_TEXT": Style(name="H_TEXT", font="txt", big_font="stxt"),
        "V_TEXT": Style(
            name="V_TEXT",
            height=1.5,
            width=2.3,
            oblique=0.5,
            is_backwards=True,
            is_upside_down=True,
            is_shape=False,
            is_vertical_text=True,
            font="1",
            big_font="2",
        ),
        "SHAPE": Style(name="SHAPE", is_shape=True),
    }
    assert parse_style_table(dxf_tags(DXF_STYLE_TABLE)) == expected


def test_new_style_table_invalid_table():
    with pytest.raises(InvalidTableError) as exc:
        parse_style_table(dxf_tags(INVALID_STYLE_TABLE))
    assert str(exc.value) == "Invalid table. Missing TABLE AND/OR ENDTAB tags."


def test_new_style_table_wrong_tag_type():
    tags = dxf_tags(DXF_STYLE_TABLE)
    tags[9] = replace(tags[9], value="im a fake int")
    with pytest.raises(TagTypeError) as exc:
        parse_style_table(tags)
    assert str(exc.value) == "Error parsing type of 'im a fake int' as an Integer"


def test_style_equality_tolerates_float_noise():
    assert Style(height=1.5) == Style(height=1.5 + 1e-12)
    assert not Style(height=1.5) == Style(height=1.6)


def test_compare_style_wrong_type():
    style = style_from(DXF_STYLE)
    assert style == style_from(DXF_STYLE)
    assert (style == "str") is False