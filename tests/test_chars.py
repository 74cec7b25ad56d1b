import pytest

from asciidraw.chars import render_char_5x7
from asciidraw.fonts import glyph_5x7


@pytest.mark.parametrize("char", ["a", "b", "c", "A", "~", " ", "\x7f"])
def test_layout_is_five_lines_of_seven_then_blank(char):
    text = render_char_5x7(char)
    assert text.endswith("\n\n")
    lines = text.split("\n")
    assert lines[5:] == ["", ""]
    assert all(len(line) == 7 for line in lines[:5])


def test_space_is_blank():
    lines = render_char_5x7(" ").split("\n")[:5]
    assert all(set(line) == {" "} for line in lines)


def test_vertical_bar_middle_column_is_full():
    lines = render_char_5x7("|").split("\n")[:5]
    assert lines[2] == "*******"
    assert lines[0].strip() == ""


def test_exclamation_bit_order():
    lines = render_char_5x7("!").split("\n")
    assert lines[2] == "* *****"


@pytest.mark.parametrize("char", ["a", "Z", "0", "@", "%"])
def test_star_count_matches_set_bits(char):
    stars = render_char_5x7(char).count("*")
    assert stars == sum(bin(column).count("1") for column in glyph_5x7(char))


@pytest.mark.parametrize("char", ["\x01", "\u00e9"])
def test_out_of_range_character_raises(char):
    with pytest.raises(ValueError):
        render_char_5x7(char)


def test_multi_character_string_raises():
    with pytest.raises(ValueError):
        render_char_5x7("ab")