"""Core data models shared across srcdoc components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List

TAG_ORDER: tuple[str, ...] = (
    "@file",
    "@typedef",
    "@struct",
    "@constants",
    "@macro",
    "@function",
)


@dataclass(frozen=True)
class CommentRange:
    """Half-open byte range ``[start, end)`` covering a comment and its delimiters."""

    start: int
    end: int

    @property
    def is_null(self) -> bool:
        return self.start == self.end


NULL_RANGE = CommentRange(0, 0)


@dataclass(frozen=True)
class Fragment:
    """One extracted documentation comment in raw and rendered form."""

    raw: str
    rendered: str


@dataclass
class OutputTarget:
    """Markdown file that one or more input files contribute fragments to."""

    name: str
    input_file_names: List[str] = field(default_factory=list)
    fragments: Dict[str, str] = field(default_factory=dict)

    def sorted_fragments(self) -> Iterator[Fragment]:
        """Yield fragments ordered by their raw comment text."""
        for raw in sorted(self.fragments):
            yield Fragment(raw=raw, rendered=self.fragments[raw])


__all__ = ["CommentRange", "Fragment", "NULL_RANGE", "OutputTarget", "TAG_ORDER"]
