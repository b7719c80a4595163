"""The result type every service method returns.

The CLI and the MCP tools both consume ServiceResult unchanged.
Failures are tagged with a closed :class:`ErrorCode`; adapters map codes to
transport status via :data:`HTTP_STATUS`, never by matching messages.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Every failure a service can report."""

    VERTEX_NOT_FOUND = "VERTEX_NOT_FOUND"
    SELF_CONNECTION = "SELF_CONNECTION"
    EDGE_ALREADY_EXISTS = "EDGE_ALREADY_EXISTS"
    EDGE_NOT_FOUND = "EDGE_NOT_FOUND"
    USER_EXISTS = "USER_EXISTS"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VERTEX_NOT_FOUND: 404,
    ErrorCode.SELF_CONNECTION: 400,
    ErrorCode.EDGE_ALREADY_EXISTS: 409,
    ErrorCode.EDGE_NOT_FOUND: 404,
    ErrorCode.USER_EXISTS: 409,
    ErrorCode.VALIDATION_FAILED: 400,
    ErrorCode.STORE_UNAVAILABLE: 503,
}


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @property
    def status(self) -> int:
        """Transport-level status for this failure."""
        return HTTP_STATUS[self.code]


class ServiceResult(BaseModel):
    """Outcome of one service call.

    ``op`` names the operation (``"connect"``, ``"degree"``). ``data`` holds
    the payload when ``ok``; ``error`` is set otherwise. ``meta`` carries
    the span tree on verbose runs.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        """Shorthand for an ``ok=False`` result carrying one error."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
