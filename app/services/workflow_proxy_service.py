"""
app/services/workflow_proxy_service.py

Forwards crawl and scrape triggers to the external workflow engine webhooks.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import lru_cache
from typing import Any
from urllib.parse import urlencode

import requests

from app.config import WorkflowSettings, get_workflow_settings
from app.domain.competitor_pages import PageRecord
from app.domain.workflow import ALLOWED_WORKFLOW_ACTIONS, WorkflowAction, WorkflowProxyResult
from app.logging_utils import log_event
from db.models.competitor import Competitor
from db.models.competitor_page import ScrapeStatus

logger = logging.getLogger(__name__)

DEFAULT_MAX_URLS = 100


class WorkflowNotConfiguredError(RuntimeError):
    """
    Raised when no webhook base URL is configured.
    """


class WorkflowProxyService:
    """
    Thin pass-through to `<base_url>/<action>` webhooks.

    Calls are made once; failures come back as unsuccessful results and are
    never retried.
    """

    def __init__(
        self,
        settings: WorkflowSettings,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = settings.base_url
        self._timeout_seconds = settings.timeout_seconds
        self._session = session or requests.Session()

    def forward(
        self,
        action: str,
        payload: Any,
        query_params: Mapping[str, str] | None = None,
    ) -> WorkflowProxyResult:
        if action not in ALLOWED_WORKFLOW_ACTIONS:
            return WorkflowProxyResult(
                success=False,
                status_code=400,
                error=f"Invalid action: {action}",
            )
        if not self._base_url:
            raise WorkflowNotConfiguredError("WORKFLOW_WEBHOOK_BASE_URL is not set.")

        url = f"{self._base_url}/{action}"
        if query_params:
            url = f"{url}?{urlencode(dict(query_params))}"

        log_event(logger, logging.INFO, "workflow_proxy_request", action=action, url=url)
        try:
            response = self._session.post(url, json=payload, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            log_event(logger, logging.ERROR, "workflow_proxy_failed", action=action, error=str(exc))
            return WorkflowProxyResult(success=False, status_code=500, error=str(exc))

        body = _parse_body(response)
        if not response.ok:
            log_event(
                logger,
                logging.ERROR,
                "workflow_engine_error",
                action=action,
                status=response.status_code,
                body=response.text,
            )
            return WorkflowProxyResult(
                success=False,
                status_code=response.status_code,
                error=f"workflow engine returned {response.status_code}",
                details=body,
            )

        return WorkflowProxyResult(success=True, status_code=200, data=body)

    def trigger_site_map(
        self,
        competitor: Competitor,
        *,
        max_urls: int = DEFAULT_MAX_URLS,
    ) -> WorkflowProxyResult:
        """
        Ask the workflow engine to (re)map a competitor's site.

        The payload mimics a database change event on the competitors table.
        """

        payload = {
            "type": "UPDATE",
            "table": "competitors",
            "schema": "public",
            "record": {
                "id": str(competitor.id),
                "project_id": str(competitor.project_id),
                "name": competitor.name,
                "main_url": competitor.main_url,
            },
            "old_record": {},
        }
        return self.forward(WorkflowAction.MAP, payload, {"max_urls": str(max_urls)})

    def trigger_scrape_pending(
        self,
        competitor_id: str,
        pages: Iterable[PageRecord],
    ) -> WorkflowProxyResult:
        """
        Ask the workflow engine to scrape every page still marked pending.
        """

        payload = {
            "competitor_id": competitor_id,
            "page_ids": pending_page_ids(pages),
        }
        return self.forward(WorkflowAction.SCRAPE_BATCH, payload)


def pending_page_ids(pages: Iterable[PageRecord]) -> list[str]:
    return [page.id for page in pages if page.scrape_status == ScrapeStatus.PENDING]


def _parse_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {"raw": response.text}


@lru_cache(maxsize=1)
def get_workflow_proxy_service() -> WorkflowProxyService:
    """
    Build and cache the workflow proxy service.
    """

    return WorkflowProxyService(get_workflow_settings())
