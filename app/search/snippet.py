"""
Excerpt generation around the first matching query term.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

SNIPPET_LEADING_CONTEXT = 60
SNIPPET_TRAILING_CONTEXT = 200
ELLIPSIS = "…"

_WHITESPACE_RUN = re.compile(r"\s+")


def _anchor_index(lowered: str, terms: Sequence[str]) -> int:
    # Terms are tried in query order, not by position in the text.
    for term in terms:
        index = lowered.find(term)
        if index >= 0:
            return index
    return 0


def generate_snippet(content: str | None, terms: Sequence[str]) -> str:
    """
    Return a bounded excerpt of content around the first term that occurs in it.

    The window spans up to 60 characters before and 200 characters after the
    anchor. Whitespace runs are collapsed, and an ellipsis marks each side
    where the window stops short of the source text.
    """

    if not content:
        return ""

    anchor = _anchor_index(content.lower(), terms)
    start = max(0, anchor - SNIPPET_LEADING_CONTEXT)
    end = min(len(content), anchor + SNIPPET_TRAILING_CONTEXT)

    snippet = _WHITESPACE_RUN.sub(" ", content[start:end]).strip()
    if start > 0:
        snippet = ELLIPSIS + snippet
    if end < len(content):
        snippet = snippet + ELLIPSIS
    return snippet
