"""Rendering of 5x7 font glyphs as asterisk pictures."""

from __future__ import annotations

from asciidraw.fonts import glyph_5x7

_ROWS = 7


def render_char_5x7(char: str) -> str:
    """Return ``char`` drawn in the 5x7 font, one glyph column per line.

    Each line shows a column with its top row on the right, and a blank
    line follows the glyph.
    """
    lines = (
        "".join("*" if bits & (1 << (_ROWS - 1 - row)) else " " for row in range(_ROWS))
        for bits in glyph_5x7(char)
    )
    return "".join(line + "\n" for line in lines) + "\n"