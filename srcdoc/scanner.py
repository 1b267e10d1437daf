"""Locate documentation comments inside raw source bytes."""

from __future__ import annotations

from typing import Iterator, Optional

from .models import NULL_RANGE, CommentRange

DOC_OPENER = b"/**"
BANG_OPENER = b"/*!"
TERMINATOR = b"*/"

_OPENER_LENGTH = 3


class ScanError(RuntimeError):
    """Raised when a source buffer cannot be scanned for comments."""


class UnterminatedCommentError(ScanError):
    """Raised when a documentation comment is opened but never closed."""

    def __init__(self, start: int, path: Optional[str] = None) -> None:
        self.start = start
        self.path = path
        location = f"{path} at offset {start}" if path else f"offset {start}"
        super().__init__(f"Documentation comment at {location} is not properly terminated")


def next_comment(
    buffer: bytes, after: CommentRange = NULL_RANGE, *, allow_bang: bool = False
) -> CommentRange:
    """Return the next comment range starting at or after ``after.end``.

    The returned range includes both delimiters. ``NULL_RANGE`` means no
    further opener exists in the buffer. An opener without a matching
    terminator raises :class:`UnterminatedCommentError`.
    """
    start = _find_opener(buffer, after.end, allow_bang)
    if start == -1:
        return NULL_RANGE

    # The third opener byte is never reused as the terminator's star, so
    # "/**/" on its own is unterminated.
    terminator = buffer.find(TERMINATOR, start + _OPENER_LENGTH)
    if terminator == -1:
        raise UnterminatedCommentError(start)
    return CommentRange(start=start, end=terminator + len(TERMINATOR))


def iter_comments(buffer: bytes, *, allow_bang: bool = False) -> Iterator[CommentRange]:
    """Yield every comment range in ``buffer`` from left to right."""
    comment_range = NULL_RANGE
    while True:
        comment_range = next_comment(buffer, comment_range, allow_bang=allow_bang)
        if comment_range.is_null:
            return
        yield comment_range


def _find_opener(buffer: bytes, position: int, allow_bang: bool) -> int:
    if len(buffer) < _OPENER_LENGTH:
        return -1
    openers = (DOC_OPENER, BANG_OPENER) if allow_bang else (DOC_OPENER,)
    hits = [index for index in (buffer.find(opener, position) for opener in openers) if index != -1]
    return min(hits) if hits else -1


__all__ = [
    "BANG_OPENER",
    "DOC_OPENER",
    "ScanError",
    "UnterminatedCommentError",
    "iter_comments",
    "next_comment",
]
