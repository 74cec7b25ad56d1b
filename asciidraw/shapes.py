"""Asterisk drawings of simple shapes, returned as text."""

from __future__ import annotations


def _row(first_col: int, end_col: int) -> str:
    """One line with stars in columns ``first_col`` up to but not including ``end_col``."""
    start = max(0, first_col)
    return " " * start + "*" * max(0, end_col - start) + "\n"


def square(left_col: int, size: int) -> str:
    """Return a ``size`` x ``size`` square whose left edge is at column ``left_col``."""
    line = _row(left_col, left_col + size)
    return line * max(0, size)


def triangle(left_col: int, size: int) -> str:
    """Return a triangle ``size + 1`` rows high whose left edge is at column ``left_col``.

    Row ``r`` holds ``2r + 1`` stars centred on column ``left_col + size``.
    """
    apex = left_col + size
    return "".join(_row(apex - row, apex + row + 1) for row in range(size + 1))


def arrow(left_col: int, size: int) -> str:
    """Return a triangle with a square shaft hanging below its centre."""
    return triangle(left_col, size) + square(left_col + int(size / 2) + 1, size)