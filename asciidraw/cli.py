"""Interactive menu that draws shapes and characters on the terminal."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from asciidraw.chars import render_char_5x7
from asciidraw.shapes import arrow, square, triangle

PROMPT = (
    "Select which shape you want to print "
    "(Triangle = t, Square = s, Chars = c, Arrow = a) or 'q' to quit\n> "
)


def _read_option(input_stream: TextIO) -> str:
    """Return the next character that is not a newline, or '' at end of input."""
    while True:
        ch = input_stream.read(1)
        if ch != "\n":
            return ch


def run(input_stream: TextIO, output_stream: TextIO) -> None:
    """Run the menu loop until 'q' is read or the input ends."""
    output_stream.write("Welcome!\n")
    while True:
        output_stream.write(PROMPT)
        output_stream.flush()
        option = _read_option(input_stream)
        if not option:
            return
        if option == "t":
            output_stream.write("You selected triangle:\n")
            output_stream.write(triangle(5, 7))
        elif option == "s":
            output_stream.write("You selected square:\n")
            output_stream.write(square(5, 5))
        elif option == "c":
            output_stream.write("You selected chars:\n")
            output_stream.write("".join(render_char_5x7(ch) for ch in "abc"))
        elif option == "a":
            output_stream.write("You selected arrow:\n")
            output_stream.write(arrow(5, 7))
        elif option == "q":
            output_stream.write("Bye!\n")
            output_stream.flush()
            return
        else:
            output_stream.write(f"Unrecognized option '{option}', please try again!\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="asciidraw", description="Draw shapes and characters with asterisks."
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())