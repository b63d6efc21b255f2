import pytest

from plotstyle.color import RED
from plotstyle.font import (
    FontData,
    FontDesc,
    FontError,
    FontFamily,
    FontStyle,
    FontTransform,
    into_font,
)
from plotstyle.text import TextStyle


def test_generic_family_names():
    assert FontFamily.SANS_SERIF.as_str() == "sans-serif"
    assert FontFamily.SERIF.as_str() == "serif"
    assert FontFamily.MONOSPACE.as_str() == "monospace"


def test_family_from_string_is_case_insensitive_for_generics():
    assert into_font("Serif").family == FontFamily.SERIF
    assert into_font("Arial").family == FontFamily("Arial")


def test_style_names():
    assert FontStyle.BOLD.as_str() == "bold"
    assert FontStyle.ITALIC.as_str() == "italic"


def test_transform_rotations():
    assert FontTransform.NONE.transform(3, 5) == (3, 5)
    assert FontTransform.ROTATE90.transform(3, 5) == (-5, 3)
    assert FontTransform.ROTATE180.transform(3, 5) == (-3, -5)
    assert FontTransform.ROTATE270.transform(3, 5) == (5, -3)


def test_into_font_defaults():
    font = into_font("serif")
    assert font.size == 12.0
    assert font.style is FontStyle.NORMAL
    assert font.transform is FontTransform.NONE
    assert font.name == "serif"


def test_into_font_tuples():
    font = into_font(("serif", 20))
    assert font.size == 20.0
    styled = into_font(("serif", 20, "bold"))
    assert styled.style is FontStyle.BOLD
    assert into_font(("serif", 20, "unknown")).style is FontStyle.NORMAL
    assert into_font(font) is font


def test_into_font_rejects_other_values():
    with pytest.raises(TypeError):
        into_font(3.5)


def test_resize_and_style_keep_other_fields():
    font = FontDesc(FontFamily.SERIF, 10.0, FontStyle.ITALIC)
    bigger = font.resize(30)
    assert bigger.size == 30.0
    assert bigger.style is FontStyle.ITALIC
    bold = font.with_style(FontStyle.BOLD)
    assert bold.size == 10.0
    assert bold.style is FontStyle.BOLD
    rotated = font.with_transform(FontTransform.ROTATE90)
    assert rotated.transform is FontTransform.ROTATE90
    assert font.transform is FontTransform.NONE


def test_layout_box_worked_example():
    assert FontDesc(FontFamily.SERIF, 15.376).layout_box("abc") == ((0, -10), (21, 2))


def test_layout_box_empty_text_has_no_width():
    (min_x, min_y), (max_x, _) = FontDesc(FontFamily.SERIF, 20.0).layout_box("")
    assert min_x == 0 and max_x == 0
    assert min_y < 0


def test_layout_width_grows_with_text():
    font = FontDesc(FontFamily.SERIF, 20.0)
    short = font.layout_box("ab")[1][0]
    long = font.layout_box("abcdefgh")[1][0]
    assert long > short


def test_layout_counts_bytes():
    font = FontDesc(FontFamily.SERIF, 20.0)
    assert font.layout_box("\u00e9") == font.layout_box("ab")


def test_box_size_matches_layout_and_rotation():
    font = FontDesc(FontFamily.SERIF, 20.0)
    (min_x, min_y), (max_x, max_y) = font.layout_box("hello")
    assert font.box_size("hello") == (max_x - min_x, max_y - min_y)
    rotated = font.with_transform(FontTransform.ROTATE90)
    assert rotated.box_size("hello") == (max_y - min_y, max_x - min_x)


def test_font_data_matches_desc():
    data = FontData("serif", "normal")
    font = FontDesc(FontFamily.SERIF, 18.0)
    assert data.estimate_layout(18.0, "xyz") == font.layout_box("xyz")


def test_draw_raises_font_error():
    font = FontDesc(FontFamily.SERIF)
    with pytest.raises(FontError):
        font.draw("text", (0, 0), lambda x, y, a: None)


def test_font_error_default_message():
    assert str(FontError()) == "General Error"


def test_color_makes_text_style():
    font = FontDesc(FontFamily.SERIF, 14.0)
    style = font.color(RED)
    assert isinstance(style, TextStyle)
    assert style.font == font
    assert style.color == RED.to_backend_color()