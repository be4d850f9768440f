"""Tests for text formatting utilities."""

from errdex.utils.text_formatting import chunk_line, first_line, truncate, wrap_line, wrap_text


def test_first_line():
    assert first_line("one\ntwo") == "one"
    assert first_line("") == ""


def test_truncate_short_text_unchanged():
    assert truncate("short", 10) == "short"


def test_truncate_long_text():
    assert truncate("a" * 60) == "a" * 50 + "..."


def test_wrap_line_fits():
    assert wrap_line("hello", 10) == ["hello"]


def test_wrap_line_breaks_at_space():
    assert wrap_line("hello brave new world", 11) == ["hello brave", "new world"]


def test_wrap_line_hard_breaks_long_word():
    assert wrap_line("abcdefghij", 4) == ["abcd", "efgh", "ij"]


def test_wrap_line_zero_width_disables_wrapping():
    assert wrap_line("hello world", 0) == ["hello world"]


def test_wrap_text_keeps_line_breaks():
    assert wrap_text("a\n\nb", 10) == ["a", "", "b"]


def test_chunk_line_keeps_spaces():
    assert chunk_line("ab cd ef", 3) == ["ab ", "cd ", "ef"]
    assert chunk_line("", 3) == [""]
