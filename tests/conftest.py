"""
Shared pytest fixtures.
"""

from __future__ import annotations

import pytest

from app.domain.competitor_pages import PageRecord
from tests.page_factories import make_page


@pytest.fixture()
def pricing_pages() -> list[PageRecord]:
    """The two-page pricing corpus: a title match and a frequency-heavy page."""
    return [
        make_page(
            "p-1",
            title="Pricing Plans",
            markdown_content="Our pricing starts at $10/mo",
            category="Pricing",
            updated_minutes=1,
        ),
        make_page(
            "p-2",
            title="About Us",
            markdown_content="We are a pricing-focused startup. pricing pricing pricing.",
            category="About",
            updated_minutes=2,
        ),
    ]
