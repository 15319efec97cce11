"""
Term highlighting for rendering snippets.
"""

from __future__ import annotations

import re
from collections.abc import Sequence


def highlight_terms(text: str, terms: Sequence[str], *, marker: str = "**") -> str:
    """
    Wrap every case-insensitive occurrence of any term in `marker`.

    Longer terms are tried first so overlapping terms mark the widest span.
    """

    if not text or not terms:
        return text

    ordered = sorted({term for term in terms if term}, key=len, reverse=True)
    if not ordered:
        return text
    pattern = re.compile("|".join(re.escape(term) for term in ordered), re.IGNORECASE)
    return pattern.sub(lambda match: f"{marker}{match.group(0)}{marker}", text)
