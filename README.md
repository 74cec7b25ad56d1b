# asciidraw

A small interactive terminal program, and the library underneath it, that
draws shapes and bitmap-font characters out of `*` characters.

## Installation

```
pip install .
```

## Interactive use

```
asciidraw
```

The program greets you with `Welcome!` and shows a menu prompt. It reads
one character at a time from standard input:

| Key | Result                                                        |
|-----|---------------------------------------------------------------|
| `t` | `triangle(5, 7)`: a triangle 8 rows high, indented 5 columns  |
| `s` | `square(5, 5)`: a 5 × 5 square, indented 5 columns            |
| `c` | the characters `a`, `b` and `c` drawn in the 5×7 font         |
| `a` | `arrow(5, 7)`: a triangle with a square shaft below it        |
| `q` | prints `Bye!` and quits                                       |

Newlines are skipped. Any other character gets an
`Unrecognized option '<char>', please try again!` message. The program
also ends quietly at end of input. `asciidraw --help` shows a short usage
message.

## Library use

The drawing functions return text, so you can print it or use it in other
ways. Every line ends with a newline.

```python
from asciidraw.shapes import square, triangle, arrow
from asciidraw.chars import render_char_5x7

print(square(2, 3), end="")        # 3 rows of "  ***"
print(triangle(0, 2), end="")      # rows of 1, 3 and 5 stars, centred on column 2
print(arrow(5, 7), end="")
print(render_char_5x7("a"), end="")
```

- `square(left_col, size)`: `size` rows of `size` stars, starting at
  column `left_col`.
- `triangle(left_col, size)`: `size + 1` rows; row `r` has `2r + 1` stars
  centred on column `left_col + size`.
- `arrow(left_col, size)`: `triangle(left_col, size)` followed by a
  `size` × `size` square starting at column `left_col + size // 2 + 1`.
- `render_char_5x7(char)`: the glyph drawn sideways, one glyph column per
  line (five lines of seven cells, the glyph's top row on the right),
  followed by a blank line.

The raw glyph data for the bundled bitmap fonts is in `asciidraw.fonts`:

- `glyph_5x7(char)`: five 7-bit column bitmaps, covering `' '` through
  `'\x7f'` (the last one is a degree sign)
- `glyph_8x12(char)`: twelve 8-bit row bitmaps, covering `' '` through `'~'`
- `glyph_11x16(char)`: eleven 16-bit column bitmaps, covering `' '` through
  `'~'`

Each raises `ValueError` for a character outside its range or a string that
is not exactly one character long, and `TypeError` for a non-string.

To drive the interactive loop from your own streams, call
`asciidraw.cli.run(input_stream, output_stream)`.

## Limitations

Only the 5×7 font has a renderer. The 8×12 and 11×16 fonts are available
as glyph data through `glyph_8x12` and `glyph_11x16`, but nothing in the
package draws them. The shape sizes and positions used by the interactive
menu are fixed and cannot be changed from the command line.

## Running the tests

```
pip install .[test]
pytest
```