"""
In-memory content search: term matching, snippets and relevance ordering.
"""

from app.search.highlight import highlight_terms
from app.search.matching import combined_text, match_positions, matches_all_terms, split_terms
from app.search.ranking import rank_results, term_occurrences, title_matches
from app.search.snippet import SNIPPET_LEADING_CONTEXT, SNIPPET_TRAILING_CONTEXT, generate_snippet

__all__ = [
    "SNIPPET_LEADING_CONTEXT",
    "SNIPPET_TRAILING_CONTEXT",
    "combined_text",
    "generate_snippet",
    "highlight_terms",
    "match_positions",
    "matches_all_terms",
    "rank_results",
    "split_terms",
    "term_occurrences",
    "title_matches",
]
