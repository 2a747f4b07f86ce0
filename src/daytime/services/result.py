"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI consumes this type; domain errors never escape a service.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from daytime.domain.errors import DaytimeError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: DaytimeError) -> ServiceError:
        """Carry the category code, operation, and offending value of *exc*."""
        return cls(
            code=exc.code,
            message=str(exc),
            detail={"op": exc.op, "value": exc.value},
        )


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: DaytimeError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
