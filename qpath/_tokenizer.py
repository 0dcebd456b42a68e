"""Single-pass segment scanner with shell-like quoting and escaping.

Quote and escape characters are kept in the segment text. Malformed input
(an unterminated quote, a trailing backslash) is consumed literally up to
the end of input.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

DELIMITER = "/"
ESCAPE = "\\"
QUOTES = ("'", '"')


class SegmentScanner:
    """Incremental tokenizer state machine.

    Feed characters one at a time; a segment is returned every time an
    unquoted, unescaped delimiter is read. Call :meth:`finish` at end of
    input to collect a trailing segment.

    Example
    -------
    >>> scanner = SegmentScanner()
    >>> [s for s in map(scanner.feed, "a/'b/c'") if s is not None]
    ['a']
    >>> scanner.finish()
    "'b/c'"
    """

    __slots__ = ("_buffer", "_quoted", "_escaping")

    def __init__(self) -> None:
        # None until the first delimiter or character starts a segment.
        self._buffer: list[str] | None = None
        self._quoted: bool = False
        self._escaping: bool = False

    @property
    def quoted(self) -> bool:
        """True while inside a quoted region."""
        return self._quoted

    @property
    def escaping(self) -> bool:
        """True when the next character is taken verbatim."""
        return self._escaping

    @property
    def pending(self) -> bool:
        """True once a segment has been started, even if it is still empty."""
        return self._buffer is not None

    def feed(self, char: str) -> str | None:
        if self._escaping:
            self._escaping = False
            self._read(char)
            return None
        if char == DELIMITER and not self._quoted:
            return self._advance()
        if char in QUOTES:
            self._quoted = not self._quoted
        elif char == ESCAPE and not self._quoted:
            self._escaping = True
        self._read(char)
        return None

    def finish(self) -> str | None:
        """Return the buffered trailing segment, if any, and reset."""
        segment = "".join(self._buffer) if self._buffer else None
        self._buffer = None
        self._quoted = False
        self._escaping = False
        return segment

    def _read(self, char: str) -> None:
        if self._buffer is None:
            self._buffer = []
        self._buffer.append(char)

    def _advance(self) -> str | None:
        # A leading delimiter only opens the first segment.
        if self._buffer is None:
            self._buffer = []
            return None
        segment = "".join(self._buffer)
        self._buffer = []
        return segment


def iter_segments(chars: Iterable[str]) -> Iterator[str]:
    scanner = SegmentScanner()
    for char in chars:
        segment = scanner.feed(char)
        if segment is not None:
            yield segment
    trailing = scanner.finish()
    if trailing is not None:
        yield trailing


def split_segments(chars: Iterable[str]) -> list[str]:
    return list(iter_segments(chars))
