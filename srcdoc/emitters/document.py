"""Tag-ordered serialisation of an output target."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..models import TAG_ORDER, Fragment, OutputTarget

FILE_TAG = "@file"


def match_tag(rendered: str, tags: Sequence[str] = TAG_ORDER) -> Optional[str]:
    """Return the first tag ``rendered`` starts with, or ``None``."""
    for tag in tags:
        if rendered.startswith(tag):
            return tag
    return None


def render_document(target: OutputTarget, tags: Sequence[str] = TAG_ORDER) -> str:
    """Serialise ``target`` with tagged fragments grouped first, untagged last.

    Within each group fragments keep their raw-text order.
    """
    fragments = list(target.sorted_fragments())
    matched = {fragment.raw: match_tag(fragment.rendered, tags) for fragment in fragments}

    parts: List[str] = []
    for tag in tags:
        for fragment in fragments:
            if matched[fragment.raw] == tag:
                parts.append(_render_fragment(fragment))
    for fragment in fragments:
        if matched[fragment.raw] is None:
            parts.append(_render_fragment(fragment))
    return "".join(parts)


def _render_fragment(fragment: Fragment) -> str:
    header = "# " if fragment.rendered.startswith(FILE_TAG) else "## "
    return header + fragment.rendered


class DocumentEmitter:
    """Renders output targets using a fixed section tag order."""

    def __init__(self, tags: Sequence[str] | None = None) -> None:
        self.tags: tuple[str, ...] = tuple(tags) if tags is not None else TAG_ORDER

    def render(self, target: OutputTarget) -> str:
        return render_document(target, self.tags)
