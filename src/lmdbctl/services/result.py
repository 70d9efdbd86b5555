"""ServiceResult and ServiceError — the command handler contract.

INVARIANT: Every handler invocation returns a ServiceResult.  Values and
listings are streamed to the output sink while the handler runs; the
result only reports success or the structured failure.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one dispatched command.

    Attributes:
        ok: Whether the command succeeded.
        op: The command verb (e.g. ``"get"``), or ``"resolve"`` when the
            line never made it past resolution.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    error: ServiceError | None = None

    @classmethod
    def success(cls, op: str) -> ServiceResult:
        return cls(ok=True, op=op)

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
