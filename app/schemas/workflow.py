"""
app/schemas/workflow.py

Schemas for workflow engine proxy calls.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from app.domain.workflow import WorkflowProxyResult


class WorkflowProxyRequest(BaseModel):
    action: str
    payload: Any = None
    query_params: dict[str, str] | None = None


class ScrapeSiteMapRequest(BaseModel):
    max_urls: int = Field(default=100, ge=1, le=10000)


class WorkflowProxyResponse(BaseModel):
    success: bool
    data: Any = None
    error: str | None = None
    details: Any = None

    @classmethod
    def from_result(cls, result: WorkflowProxyResult) -> "WorkflowProxyResponse":
        return cls(
            success=result.success,
            data=result.data,
            error=result.error,
            details=result.details,
        )

    def to_body(self) -> dict[str, Any]:
        """
        JSON body for the proxy reply.

        Successful calls always carry `data`, even when the engine answered
        `null`. `error` and `details` are only present when set.
        """

        body: dict[str, Any] = {"success": self.success}
        if self.success:
            body["data"] = self.data
        for name in ("error", "details"):
            value = getattr(self, name)
            if value is not None:
                body[name] = value
        return body
