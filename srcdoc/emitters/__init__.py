"""Markdown emitters for output targets and the index document."""

from .document import DocumentEmitter, match_tag, render_document
from .index import INDEX_TITLE, IndexEmitter, render_index

__all__ = [
    "DocumentEmitter",
    "INDEX_TITLE",
    "IndexEmitter",
    "match_tag",
    "render_document",
    "render_index",
]
