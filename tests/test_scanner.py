"""Tests for srcdoc.scanner."""

from __future__ import annotations

import pytest

from srcdoc.models import NULL_RANGE, CommentRange
from srcdoc.scanner import UnterminatedCommentError, iter_comments, next_comment


def test_next_comment_returns_null_range_without_openers() -> None:
    buffer = b"int x; /* plain */ // line\n"
    comment_range = next_comment(buffer, NULL_RANGE)
    assert comment_range == NULL_RANGE
    assert next_comment(buffer, comment_range) == NULL_RANGE


@pytest.mark.parametrize("buffer", [b"", b"/", b"/*"])
def test_next_comment_handles_short_buffers(buffer: bytes) -> None:
    assert next_comment(buffer, NULL_RANGE) == NULL_RANGE


def test_next_comment_finds_comments_left_to_right() -> None:
    buffer = b"/** a */x/** b */"
    first = next_comment(buffer, NULL_RANGE)
    assert first == CommentRange(0, 8)
    assert buffer[first.start : first.end] == b"/** a */"

    second = next_comment(buffer, first)
    assert second == CommentRange(9, 17)
    assert buffer[second.start : second.end] == b"/** b */"

    assert next_comment(buffer, second).is_null


def test_next_comment_handles_back_to_back_comments() -> None:
    buffer = b"/**a*//**b*/"
    assert list(iter_comments(buffer)) == [CommentRange(0, 6), CommentRange(6, 12)]


def test_next_comment_ignores_plain_block_comments() -> None:
    buffer = b"/* skip */\nint y;\n/** keep */\n"
    ranges = list(iter_comments(buffer))
    assert len(ranges) == 1
    assert buffer[ranges[0].start : ranges[0].end] == b"/** keep */"


def test_next_comment_raises_for_unterminated_comment() -> None:
    buffer = b"/** ok */\nint z;\n/** never closed\n"
    first = next_comment(buffer, NULL_RANGE)
    with pytest.raises(UnterminatedCommentError) as excinfo:
        next_comment(buffer, first)
    assert excinfo.value.start == 17
    assert "offset 17" in str(excinfo.value)


def test_opener_star_is_not_reused_as_terminator() -> None:
    with pytest.raises(UnterminatedCommentError) as excinfo:
        next_comment(b"/**/", NULL_RANGE)
    assert excinfo.value.start == 0


def test_bang_comments_require_opt_in() -> None:
    buffer = b"/*! bang */ /** doc */"
    assert [buffer[r.start : r.end] for r in iter_comments(buffer)] == [b"/** doc */"]
    assert [buffer[r.start : r.end] for r in iter_comments(buffer, allow_bang=True)] == [
        b"/*! bang */",
        b"/** doc */",
    ]
