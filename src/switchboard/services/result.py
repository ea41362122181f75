"""ServiceResult, ServiceError and ReadResult — the universal result contract.

INVARIANT: Expected user-input failures are returned, never raised.
Readers return ReadResult; preconditions, commands and services return
ServiceResult. Exceptions are reserved for programming errors.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Stable error codes carried by ServiceError.code."""

    UNKNOWN_COMMAND = "UNKNOWN_COMMAND"
    NOT_FOUND = "NOT_FOUND"
    ACCOUNT_NO_SYSTEM = "ACCOUNT_NO_SYSTEM"
    BAD_ARG_COUNT = "BAD_ARG_COUNT"
    NO_SYSTEM = "NO_SYSTEM"
    NEEDS_MEMBER = "NEEDS_MEMBER"
    NOT_OWNER = "NOT_OWNER"
    INVALID_URL = "INVALID_URL"
    INVALID_FIXTURE = "INVALID_FIXTURE"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for engine, command and service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"system member list"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing, telemetry).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(cls, op: str, **data: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data)

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))


class ReadResult(BaseModel):
    """Outcome of parsing one command argument.

    Exactly one of ``value`` (on success) or ``error`` (on failure) is
    meaningful; ``ok`` says which.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    ok: bool
    value: Any = None
    error: ServiceError | None = None

    @classmethod
    def success(cls, value: Any) -> ReadResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, code: str, message: str, **detail: Any) -> ReadResult:
        return cls(ok=False, error=ServiceError(code=code, message=message, detail=detail))
