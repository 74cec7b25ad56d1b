import io
import sys

from asciidraw.chars import render_char_5x7
from asciidraw.cli import PROMPT, main, run
from asciidraw.shapes import arrow, square, triangle


def _session(text):
    out = io.StringIO()
    run(io.StringIO(text), out)
    return out.getvalue()


def test_quit_immediately():
    assert _session("q") == "Welcome!\n" + PROMPT + "Bye!\n"


def test_end_of_input_stops_after_prompt():
    assert _session("") == "Welcome!\n" + PROMPT


def test_newlines_are_ignored():
    assert _session("\n\n\nq\n") == "Welcome!\n" + PROMPT + "Bye!\n"


def test_triangle_option():
    output = _session("t")
    assert output == (
        "Welcome!\n" + PROMPT + "You selected triangle:\n" + triangle(5, 7) + PROMPT
    )


def test_square_option():
    output = _session("s\nq")
    expected = "You selected square:\n" + square(5, 5) + PROMPT + "Bye!\n"
    assert output.endswith(expected)


def test_arrow_option():
    output = _session("a\n")
    assert "You selected arrow:\n" + arrow(5, 7) in output


def test_chars_option_draws_a_b_c():
    output = _session("c\nq\n")
    drawings = render_char_5x7("a") + render_char_5x7("b") + render_char_5x7("c")
    assert "You selected chars:\n" + drawings + PROMPT in output


def test_unrecognized_option():
    output = _session("x\nq\n")
    assert "Unrecognized option 'x', please try again!\n" in output
    assert output.count(PROMPT) == 2


def test_each_character_on_a_line_is_an_option():
    output = _session("zy\nq")
    assert "Unrecognized option 'z'" in output
    assert "Unrecognized option 'y'" in output
    assert output.count(PROMPT) == 3


def test_input_after_quit_is_not_read():
    source = io.StringIO("qt")
    run(source, io.StringIO())
    assert source.read() == "t"


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("s\nq\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert captured.startswith("Welcome!\n")
    assert square(5, 5) in captured
    assert captured.endswith("Bye!\n")