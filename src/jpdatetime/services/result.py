"""Result envelope returned by every DateTimeService operation.

INVARIANT: ``ok`` is False exactly when ``error`` is set. Build results with
:meth:`ServiceResult.success` and :meth:`ServiceResult.failure`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation produced no value, e.g. ``OUT_OF_RANGE``."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one date/time operation.

    Attributes:
        ok: False when the operation could not produce a value.
        op: Operation name as shown by the CLI (``"show"``, ``"shift"``, ...).
        data: Rendered strings and primitives keyed by field name.
        warnings: Inputs that were unreadable and replaced by the current time.
        error: Set only when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
