import pytest
from qpath._tokenizer import SegmentScanner, iter_segments, split_segments


def test_simple_absolute():
    assert split_segments("/usr/local/bin") == ["usr", "local", "bin"]


def test_relative():
    assert split_segments("usr/local") == ["usr", "local"]


def test_leading_delimiter_not_a_segment():
    assert split_segments("/a") == ["a"]


def test_second_leading_delimiter_is_empty_segment():
    assert split_segments("//a") == ["", "a"]


def test_double_delimiter_keeps_empty_segment():
    assert split_segments("a//b") == ["a", "", "b"]


def test_trailing_delimiter_dropped():
    assert split_segments("a/b/") == ["a", "b"]


def test_trailing_text_captured():
    assert split_segments("a/b") == ["a", "b"]


@pytest.mark.parametrize("raw", ["", "/"])
def test_no_segments(raw):
    assert split_segments(raw) == []


def test_escaped_delimiter():
    assert split_segments("/usr/local/\\/bin") == ["usr", "local", "\\/bin"]


def test_single_quoted_delimiter():
    assert split_segments("/usr/local/'/'bin") == ["usr", "local", "'/'bin"]


def test_double_quoted_delimiter():
    assert split_segments('/usr/local/"/"bin') == ["usr", "local", '"/"bin']


def test_quote_kinds_do_not_need_to_match():
    assert split_segments("a/'b/\"c/d") == ["a", "'b/\"c", "d"]


def test_escaped_quote_does_not_open_quoting():
    assert split_segments("a\\'b/c") == ["a\\'b", "c"]


def test_backslash_is_literal_inside_quotes():
    # The backslash does not escape the closing quote.
    assert split_segments("'a\\'/b") == ["'a\\'", "b"]


def test_escaped_backslash():
    assert split_segments("a\\\\/b") == ["a\\\\", "b"]


def test_unterminated_quote_consumed_to_end():
    assert split_segments("a/'b/c/d") == ["a", "'b/c/d"]


def test_trailing_escape_kept():
    assert split_segments("a/b\\") == ["a", "b\\"]


def test_accepts_iterable_of_characters():
    assert split_segments(iter(["a", "/", "b"])) == ["a", "b"]


def test_iter_segments_is_lazy():
    segments = iter_segments("a/b/c")
    assert next(segments) == "a"
    assert list(segments) == ["b", "c"]


def test_scanner_state_bits():
    scanner = SegmentScanner()
    assert not scanner.pending
    scanner.feed("'")
    assert scanner.quoted
    assert scanner.pending
    scanner.feed("'")
    assert not scanner.quoted
    scanner.feed("\\")
    assert scanner.escaping
    scanner.feed("/")
    assert not scanner.escaping


def test_scanner_feed_returns_flushed_segment():
    scanner = SegmentScanner()
    assert scanner.feed("/") is None
    assert scanner.feed("a") is None
    assert scanner.feed("/") == "a"
    assert scanner.feed("/") == ""
    assert scanner.finish() is None


def test_scanner_finish_resets():
    scanner = SegmentScanner()
    for char in "'open":
        scanner.feed(char)
    assert scanner.finish() == "'open"
    assert not scanner.quoted
    assert not scanner.pending
    assert scanner.feed("/") is None
