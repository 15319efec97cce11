"""
tests/test_snippet.py

Unit tests for snippet windowing around the first matching term.
"""

from __future__ import annotations

from app.search.snippet import ELLIPSIS, generate_snippet


def test_empty_content_returns_empty_string() -> None:
    assert generate_snippet("", ["pricing"]) == ""
    assert generate_snippet(None, ["pricing"]) == ""


def test_short_text_with_early_match_is_returned_whole() -> None:
    content = "Our pricing\n\nstarts at   $10/mo  "
    assert generate_snippet(content, ["pricing"]) == "Our pricing starts at $10/mo"


def test_trailing_ellipsis_when_window_stops_before_end() -> None:
    content = "pricing " + "x" * 300
    snippet = generate_snippet(content, ["pricing"])

    assert not snippet.startswith(ELLIPSIS)
    assert snippet.endswith(ELLIPSIS)
    assert snippet[:-1] == content[:200].strip()


def test_leading_ellipsis_when_match_is_far_into_text() -> None:
    content = "a" * 100 + "pricing" + "b" * 20
    snippet = generate_snippet(content, ["pricing"])

    assert snippet.startswith(ELLIPSIS)
    assert not snippet.endswith(ELLIPSIS)
    # 60 characters of leading context before the anchor.
    assert snippet == ELLIPSIS + "a" * 60 + "pricing" + "b" * 20


def test_anchor_uses_first_term_in_query_order() -> None:
    content = "alpha " + "-" * 100 + " beta"
    snippet = generate_snippet(content, ["beta", "alpha"])

    assert snippet.startswith(ELLIPSIS)
    assert snippet.endswith("beta")


def test_missing_terms_anchor_at_start() -> None:
    content = "nothing to see here " * 20
    snippet = generate_snippet(content, ["pricing"])

    assert not snippet.startswith(ELLIPSIS)
    assert snippet.endswith(ELLIPSIS)


def test_matching_is_case_insensitive() -> None:
    content = "z" * 80 + "PRICING table"
    snippet = generate_snippet(content, ["pricing"])

    assert snippet == ELLIPSIS + "z" * 60 + "PRICING table"


def test_whitespace_runs_are_collapsed_inside_window() -> None:
    snippet = generate_snippet("one\t\ttwo\n\n\nthree    four", ["two"])
    assert snippet == "one two three four"
