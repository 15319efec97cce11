"""
app/domain/workflow.py

Domain models for workflow engine webhook calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class WorkflowAction:
    MAP = "map"
    SCRAPE_BATCH = "scrape-batch"


ALLOWED_WORKFLOW_ACTIONS = (WorkflowAction.MAP, WorkflowAction.SCRAPE_BATCH)


@dataclass(frozen=True)
class WorkflowProxyResult:
    """
    Outcome of one forwarded webhook call.

    status_code is the HTTP status the API should answer with.
    """

    success: bool
    status_code: int
    data: Any = None
    error: str | None = None
    details: Any = None
