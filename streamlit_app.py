"""Streamlit search dashboard for CompetitorIQ."""

from __future__ import annotations

from typing import Any

import pandas as pd
import streamlit as st

from app.domain.search import SearchResult
from app.search.highlight import highlight_terms
from app.search.matching import split_terms
from app.services.category_service import retain_known_competitors

st.set_page_config(page_title="CompetitorIQ Search", page_icon="CI", layout="wide")


@st.cache_resource(show_spinner=False)
def _load_backend_handles():
    """Load backend services lazily to keep startup lightweight."""
    from app.services.project_service import ProjectService  # noqa: PLC0415
    from app.services.search_service import ContentSearchService, get_saved_search_store  # noqa: PLC0415
    from db.repositories.page_repository import CompetitorPageRepository  # noqa: PLC0415
    from db.session import SessionLocal  # noqa: PLC0415

    return {
        "project_service": ProjectService,
        "search_service": ContentSearchService,
        "page_repository": CompetitorPageRepository,
        "saved_store": get_saved_search_store(),
        "session_factory": SessionLocal,
    }


@st.cache_data(show_spinner=False, ttl=60)
def _load_competitor_options() -> dict[str, str]:
    """Map competitor id to a display label across all projects."""
    handles = _load_backend_handles()
    options: dict[str, str] = {}
    with handles["session_factory"]() as db:
        service = handles["project_service"](db)
        for project in service.list_projects():
            for competitor in service.list_competitors(project.id):
                options[str(competitor.id)] = f"{competitor.name} ({project.name})"
    return options


def run_search(query: str, category: str | None, competitor_ids: list[str]) -> list[SearchResult]:
    handles = _load_backend_handles()
    with handles["session_factory"]() as db:
        service = handles["search_service"](handles["page_repository"](db))
        return service.search(query, competitor_ids=competitor_ids or None, category=category)


def _results_frame(results: list[SearchResult]) -> pd.DataFrame:
    rows: list[dict[str, Any]] = [
        {
            "competitor": result.page.competitor_name,
            "title": result.page.title or result.page.url,
            "category": result.page.category,
            "status": result.page.scrape_status or "unknown",
            "updated_at": result.page.updated_at,
            "url": result.page.url,
        }
        for result in results
    ]
    return pd.DataFrame(rows)


_STATE_DEFAULTS: dict[str, Any] = {
    "query": "",
    "results": None,
    "search_error": None,
    "category": "All",
    "competitor_ids": [],
}

for _key, _val in _STATE_DEFAULTS.items():
    if _key not in st.session_state:
        st.session_state[_key] = _val

saved_store = _load_backend_handles()["saved_store"]
competitor_options = _load_competitor_options()

# ── Sidebar: saved searches ────────────────────────────────────────────────
with st.sidebar:
    st.title("CompetitorIQ")
    st.caption("Search scraped competitor content")
    st.divider()
    st.subheader("Saved searches")
    saved_searches = saved_store.list()
    if not saved_searches:
        st.caption("No saved searches yet.")
    for saved in saved_searches:
        col_run, col_delete = st.columns([4, 1])
        label = saved.query if not saved.category else f"{saved.query} · {saved.category}"
        if col_run.button(label, key=f"run-{saved.id}", use_container_width=True):
            st.session_state.query = saved.query
            st.session_state.category = saved.category or "All"
            st.session_state.competitor_ids = retain_known_competitors(saved.competitor_ids, competitor_options)
            st.session_state.results = None
        if col_delete.button("✕", key=f"delete-{saved.id}"):
            saved_store.delete(saved.id)
            st.rerun()

# ── Search form ────────────────────────────────────────────────────────────
# Multiselect values must be among its options.
st.session_state.competitor_ids = retain_known_competitors(
    st.session_state.competitor_ids, competitor_options
)

with st.form("search"):
    query = st.text_input("Search", key="query", placeholder="e.g. pricing enterprise")
    fcol1, fcol2 = st.columns(2)
    with fcol1:
        category_input = st.text_input("Category", value="" if st.session_state.category == "All" else st.session_state.category)
    with fcol2:
        selected_competitors = st.multiselect(
            "Competitors",
            options=list(competitor_options),
            format_func=lambda competitor_id: competitor_options.get(competitor_id, competitor_id),
            key="competitor_ids",
        )
    submitted = st.form_submit_button("Search", type="primary")

category_filter = category_input.strip() or None
st.session_state.category = category_filter or "All"

if submitted:
    if not query.strip():
        st.session_state.results = []
        st.session_state.search_error = None
    else:
        with st.spinner("Searching..."):
            try:
                st.session_state.results = run_search(query.strip(), category_filter, selected_competitors)
                st.session_state.search_error = None
            except Exception as exc:  # noqa: BLE001
                st.session_state.results = None
                st.session_state.search_error = f"Search failed: {exc}"

# ── Results ────────────────────────────────────────────────────────────────
if st.session_state.search_error:
    st.error(st.session_state.search_error)
elif st.session_state.results is None:
    st.info("Enter a query to search across all scraped pages.")
else:
    results: list[SearchResult] = st.session_state.results
    terms = split_terms(query)
    header_col, save_col = st.columns([4, 1])
    header_col.subheader(f"{len(results)} result(s)")
    if query.strip() and save_col.button("Save search", use_container_width=True):
        saved_store.save(query.strip(), category_filter, selected_competitors)
        st.toast(f'Search saved: "{query.strip()}"')
        st.rerun()

    if results:
        categories = sorted({result.page.category for result in results})
        st.caption("Categories in results: " + ", ".join(categories))
        st.dataframe(_results_frame(results), use_container_width=True, hide_index=True)

        for result in results:
            with st.container(border=True):
                st.markdown(f"**{result.page.title or result.page.url}** · {result.page.competitor_name}")
                st.caption(f"{result.page.category} · {result.page.url}")
                st.markdown(highlight_terms(result.snippet, terms))
