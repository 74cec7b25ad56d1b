import string

import pytest

from asciidraw.fonts import glyph_11x16, glyph_5x7, glyph_8x12

PRINTABLE = [chr(code) for code in range(0x20, 0x7F)]


def test_5x7_known_glyphs():
    assert glyph_5x7("A") == (0x7E, 0x11, 0x11, 0x11, 0x7E)
    assert glyph_5x7("a") == (0x20, 0x54, 0x54, 0x54, 0x78)
    assert glyph_5x7("!") == (0x00, 0x00, 0x5F, 0x00, 0x00)


def test_5x7_includes_degree_sign():
    assert glyph_5x7("\x7f") == (0x00, 0x06, 0x09, 0x09, 0x06)


def test_8x12_known_glyphs():
    assert glyph_8x12("A") == (
        0x00, 0x38, 0x6C, 0xC6, 0xC6, 0xC6, 0xFE, 0xC6, 0xC6, 0xC6, 0x00, 0x00,
    )
    assert glyph_8x12("_")[-1] == 0xFF


def test_11x16_known_glyphs():
    assert glyph_11x16("0") == (
        0x07F8, 0x1FFE, 0x1E06, 0x3303, 0x3183, 0x30C3,
        0x3063, 0x3033, 0x181E, 0x1FFE, 0x07F8,
    )
    assert glyph_11x16("_") == (0xC000,) * 11


@pytest.mark.parametrize(
    "glyph, length",
    [(glyph_5x7, 5), (glyph_8x12, 12), (glyph_11x16, 11)],
)
def test_space_is_blank(glyph, length):
    assert glyph(" ") == (0,) * length


@pytest.mark.parametrize(
    "glyph, length, bits",
    [(glyph_5x7, 5, 7), (glyph_8x12, 12, 8), (glyph_11x16, 11, 16)],
)
def test_every_printable_glyph_fits_its_cell(glyph, length, bits):
    for char in PRINTABLE:
        columns = glyph(char)
        assert len(columns) == length
        assert all(0 <= column < (1 << bits) for column in columns)


@pytest.mark.parametrize("glyph", [glyph_5x7, glyph_8x12, glyph_11x16])
def test_visible_characters_have_ink(glyph):
    for char in string.ascii_letters + string.digits + string.punctuation:
        assert sum(glyph(char)) > 0, char


@pytest.mark.parametrize("glyph", [glyph_5x7, glyph_8x12, glyph_11x16])
def test_letters_are_distinct(glyph):
    shapes = {glyph(char) for char in string.ascii_uppercase}
    assert len(shapes) == len(string.ascii_uppercase)


def test_5x7_symmetric_letters():
    for char in "AHIMOTUVWXY":
        columns = glyph_5x7(char)
        assert columns == columns[::-1], char


@pytest.mark.parametrize("glyph", [glyph_8x12, glyph_11x16])
def test_delete_outside_larger_fonts(glyph):
    with pytest.raises(ValueError):
        glyph("\x7f")


@pytest.mark.parametrize("glyph", [glyph_5x7, glyph_8x12, glyph_11x16])
@pytest.mark.parametrize("char", ["\n", "\x1f", "\x80", "é"])
def test_out_of_range_character(glyph, char):
    with pytest.raises(ValueError):
        glyph(char)


@pytest.mark.parametrize("glyph", [glyph_5x7, glyph_8x12, glyph_11x16])
@pytest.mark.parametrize("text", ["", "ab"])
def test_wrong_length(glyph, text):
    with pytest.raises(ValueError):
        glyph(text)


@pytest.mark.parametrize("glyph", [glyph_5x7, glyph_8x12, glyph_11x16])
def test_non_string_rejected(glyph):
    with pytest.raises(TypeError):
        glyph(65)