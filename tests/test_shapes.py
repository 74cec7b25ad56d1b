import pytest

from asciidraw.shapes import arrow, square, triangle


@pytest.mark.parametrize("left_col,size", [(0, 1), (0, 4), (5, 5), (3, 7)])
def test_square_dimensions(left_col, size):
    lines = square(left_col, size).splitlines()
    assert len(lines) == size
    for line in lines:
        assert line == " " * left_col + "*" * size


def test_square_small_literal():
    assert square(1, 2) == " **\n **\n"


@pytest.mark.parametrize("size", [0, -3])
def test_square_empty_for_non_positive_size(size):
    assert square(4, size) == ""


def test_square_negative_left_col_clips_stars():
    lines = square(-2, 5).splitlines()
    assert len(lines) == 5
    assert all(line == "*" * 3 for line in lines)


@pytest.mark.parametrize("left_col,size", [(0, 0), (0, 3), (5, 7), (2, 4)])
def test_triangle_rows(left_col, size):
    lines = triangle(left_col, size).splitlines()
    assert len(lines) == size + 1
    for row, line in enumerate(lines):
        stripped = line.lstrip(" ")
        assert stripped == "*" * (2 * row + 1)
        assert len(line) - len(stripped) == left_col + size - row


def test_triangle_is_symmetric_about_apex():
    left_col, size = 5, 7
    apex = left_col + size
    for line in triangle(left_col, size).splitlines():
        stars = [i for i, ch in enumerate(line) if ch == "*"]
        assert stars[0] + stars[-1] == 2 * apex


def test_triangle_empty_for_negative_size():
    assert triangle(3, -1) == ""


def test_triangle_small_literal():
    assert triangle(0, 1) == " *\n***\n"


@pytest.mark.parametrize("left_col,size", [(5, 7), (0, 4), (2, 1)])
def test_arrow_is_triangle_over_square(left_col, size):
    drawing = arrow(left_col, size)
    head = triangle(left_col, size)
    assert drawing.startswith(head)
    shaft = drawing[len(head):].splitlines()
    assert len(shaft) == size
    offset = left_col + size // 2 + 1
    assert all(line == " " * offset + "*" * size for line in shaft)


def test_arrow_total_line_count():
    assert len(arrow(5, 7).splitlines()) == 8 + 7