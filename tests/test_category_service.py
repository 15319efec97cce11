"""
tests/test_category_service.py

Category counts, comparison grouping and page statistics.
"""

from __future__ import annotations

from datetime import datetime, timezone

from app.domain.competitor_pages import UNCATEGORIZED, effective_category
from app.services.category_service import (
    count_categories,
    filter_pages,
    group_by_competitor,
    retain_known_competitors,
    summarize_pages,
)
from tests.page_factories import make_page


def _pages():
    return [
        make_page("1", category="Pricing", competitor_id="c-b", competitor_name="beta"),
        make_page("2", category="Blog", competitor_id="c-a", competitor_name="Alpha"),
        make_page("3", category="Pricing", competitor_id="c-a", competitor_name="Alpha"),
        make_page("4", competitor_id="c-b", competitor_name="beta", scrape_status="pending"),
        make_page("5", category="Blog", competitor_id="c-c", competitor_name="Gamma", scrape_status=None),
    ]


class TestEffectiveCategory:
    def test_reads_category_from_metadata(self) -> None:
        assert effective_category({"category": "Pricing"}) == "Pricing"

    def test_missing_or_null_category_is_uncategorized(self) -> None:
        assert effective_category({}) == UNCATEGORIZED
        assert effective_category({"category": None}) == UNCATEGORIZED
        assert effective_category(None) == UNCATEGORIZED

    def test_non_string_category_is_stringified(self) -> None:
        assert effective_category({"category": 3}) == "3"
        assert effective_category({"category": ["Pricing", "Plans"]}) == "['Pricing', 'Plans']"

    def test_list_category_can_be_counted(self) -> None:
        pages = [
            make_page("x", metadata={"category": ["Pricing"]}),
            make_page("y", metadata={"category": ["Pricing"]}),
        ]

        assert count_categories(pages) == [("['Pricing']", 2)]


class TestCountCategories:
    def test_counts_sorted_descending_with_first_seen_ties(self) -> None:
        assert count_categories(_pages()) == [
            ("Pricing", 2),
            ("Blog", 2),
            (UNCATEGORIZED, 1),
        ]

    def test_empty_input(self) -> None:
        assert count_categories([]) == []


class TestFilterPages:
    def test_no_filters_keeps_everything(self) -> None:
        assert len(filter_pages(_pages())) == 5

    def test_category_and_competitor_filters_combine(self) -> None:
        selected = filter_pages(_pages(), category="Pricing", competitor_ids=["c-a"])
        assert [p.id for p in selected] == ["3"]

    def test_uncategorized_filter(self) -> None:
        assert [p.id for p in filter_pages(_pages(), category=UNCATEGORIZED)] == ["4"]


class TestRetainKnownCompetitors:
    def test_drops_deleted_competitors_in_saved_order(self) -> None:
        known = {"c-a": "Alpha", "c-c": "Gamma"}

        assert retain_known_competitors(["c-c", "c-gone", "c-a"], known) == ["c-c", "c-a"]

    def test_all_deleted_leaves_empty_selection(self) -> None:
        assert retain_known_competitors(["c-gone"], {}) == []


class TestGroupByCompetitor:
    def test_groups_sorted_by_name_case_insensitively(self) -> None:
        groups = group_by_competitor(_pages())

        assert [g.competitor_name for g in groups] == ["Alpha", "beta", "Gamma"]
        assert [p.id for p in groups[0].pages] == ["2", "3"]
        assert [p.id for p in groups[1].pages] == ["1", "4"]


class TestSummarizePages:
    def test_counts_statuses_and_top_category(self) -> None:
        crawled = datetime(2026, 2, 1, tzinfo=timezone.utc)

        stats = summarize_pages(_pages(), last_crawled_at=crawled)

        assert stats.total_pages == 5
        assert stats.status_counts == {"success": 3, "pending": 1, "unknown": 1}
        assert stats.success_count == 3
        assert stats.pending_count == 1
        assert stats.top_category == ("Pricing", 2)
        assert stats.last_crawled_at == crawled

    def test_empty_pages(self) -> None:
        stats = summarize_pages([])

        assert stats.total_pages == 0
        assert stats.top_category is None
        assert stats.success_count == 0
