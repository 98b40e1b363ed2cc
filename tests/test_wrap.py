"""Tests for two-line splitting and paragraph wrapping."""

from wordgrid.layout.wrap import split_into_two_lines, wrap_text_to_lines


def test_split_fits_untouched():
    assert split_into_two_lines("Hello World", 20) == (["Hello World"], False)


def test_split_exact_length_not_wrapped():
    assert split_into_two_lines("ABCDE", 5) == (["ABCDE"], False)


def test_split_at_space():
    lines, wrapped = split_into_two_lines("Prospecting & Pipeline", 12)
    assert wrapped
    assert lines == ["Prospecting", "& Pipeline"]


def test_split_at_hyphen():
    """The hyphen starts the second line."""
    lines, wrapped = split_into_two_lines("Data-Driven Growth", 8)
    assert wrapped
    assert lines == ["Data", "-Driven Growth"]


def test_split_hard_break():
    lines, wrapped = split_into_two_lines("ABCDEFGHIJKLMNOP", 11)
    assert wrapped
    assert lines == ["ABCDEFGHIJK", "LMNOP"]


def test_split_prefers_nearest_break():
    lines, _ = split_into_two_lines("one two three four", 10)
    assert lines == ["one two", "three four"]


def test_split_never_more_than_two_lines():
    text = "a very long label that would need many lines to fit"
    lines, wrapped = split_into_two_lines(text, 5)
    assert wrapped
    assert len(lines) == 2
    assert len(lines[0]) <= 5


def test_wrap_respects_max_lines():
    lines = wrap_text_to_lines("a " * 200, 10, 5)
    assert len(lines) <= 5
    assert lines[0] == "a a a a a"


def test_wrap_drops_words_past_cap():
    assert wrap_text_to_lines("one two three four", 5, 2) == ["one", "two"]


def test_wrap_keeps_long_word_whole():
    lines = wrap_text_to_lines("tiny supercalifragilistic word", 8, 6)
    assert lines == ["tiny", "supercalifragilistic", "word"]


def test_wrap_line_widths():
    text = "We build outbound systems that book meetings while you sleep"
    lines = wrap_text_to_lines(text, 16, 10)
    assert " ".join(lines) == text
    assert all(len(line) <= 16 for line in lines)


def test_wrap_collapses_whitespace():
    assert wrap_text_to_lines("  alpha\n\tbeta   gamma ", 40) == ["alpha beta gamma"]


def test_wrap_empty_and_zero_lines():
    assert wrap_text_to_lines("", 10, 3) == []
    assert wrap_text_to_lines("alpha beta", 3, 0) == []
