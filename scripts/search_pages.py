"""
Run a content search from the CLI and print results as JSON.
"""

from __future__ import annotations

import argparse
import json

from app.logging_utils import configure_logging
from app.services.search_service import ContentSearchService, get_saved_search_store
from db.repositories.page_repository import CompetitorPageRepository
from db.session import SessionLocal


def main() -> int:
    parser = argparse.ArgumentParser(description="Search scraped competitor pages.")
    parser.add_argument("query", help="Whitespace-separated search terms.")
    parser.add_argument("--category", default=None, help="Exact page category filter.")
    parser.add_argument(
        "--competitor-id",
        dest="competitor_ids",
        action="append",
        default=[],
        help="Restrict to a competitor id. Repeatable.",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Also store this query as a saved search.",
    )
    args = parser.parse_args()

    configure_logging()
    with SessionLocal() as db:
        service = ContentSearchService(CompetitorPageRepository(db))
        results = service.search(args.query, competitor_ids=args.competitor_ids, category=args.category)

    if args.save:
        get_saved_search_store().save(args.query, args.category, args.competitor_ids)

    payload = [
        {
            "competitor": result.page.competitor_name,
            "title": result.page.title,
            "url": result.page.url,
            "category": result.page.category,
            "snippet": result.snippet,
            "match_positions": result.match_positions,
        }
        for result in results
    ]
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
