"""Convert raw documentation comments into Markdown fragments."""

from __future__ import annotations

from typing import List

SOURCE_ENCODING = "utf-8"
SOURCE_ERRORS = "surrogateescape"

_OPEN_LENGTH = 3
_CLOSE_LENGTH = 2
_DECORATIONS = (" * ", " *")


def decode_comment(raw: bytes) -> str:
    """Decode comment bytes so that any byte sequence survives re-encoding."""
    return raw.decode(SOURCE_ENCODING, errors=SOURCE_ERRORS)


def comment_to_markdown(raw: str) -> str:
    """Strip comment delimiters and leading ``*`` decoration from each line.

    ``/** text`` and ``/**text`` render the same first line: the single space
    separating the opener from inline text is dropped. Empty lines are skipped,
    so a comment whose opener ends its line starts with the next line. Every
    other line loses one leading ``" * "`` or ``" *"`` and is otherwise emitted
    verbatim. Each line, including the last, is terminated with a newline.
    """
    body = raw[_OPEN_LENGTH : len(raw) - _CLOSE_LENGTH]
    if body.startswith(" ") and not body.startswith(_DECORATIONS[1]):
        body = body[1:]
    lines: List[str] = []
    for line in body.split("\n"):
        if not line:
            continue
        lines.append(strip_decoration(line))
        lines.append("\n")
    return "".join(lines)


def strip_decoration(line: str) -> str:
    """Remove one leading ``" * "`` (or bare ``" *"``) from ``line``."""
    for decoration in _DECORATIONS:
        if line.startswith(decoration):
            return line[len(decoration) :]
    return line


__all__ = [
    "SOURCE_ENCODING",
    "SOURCE_ERRORS",
    "comment_to_markdown",
    "decode_comment",
    "strip_decoration",
]
