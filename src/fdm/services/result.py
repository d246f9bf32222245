"""The result envelope every service method returns.

Domain code reports failures as values (:mod:`fdm.domain.result`). This
module turns them into a pydantic model the output layer can render or
dump as JSON, so nothing above the services needs the failure taxonomy.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fdm.domain.result import Failure


class ServiceError(BaseModel):
    """Why an operation failed: a stable ``code``, a message, and details."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_failure(cls, failure: Failure) -> ServiceError:
        return cls(code=failure.code, message=failure.message, detail=failure.detail())


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    ``op`` names the operation (``"validate"``, ``"classify"``, ...) and
    selects the human renderer. On success ``data`` holds the payload and
    ``warnings`` any non-fatal notes; on failure ``error`` is set.
    """

    model_config = ConfigDict(frozen=True)

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
    def failure(cls, op: str, failure: Failure) -> ServiceResult:
        """Wrap a domain failure."""
        return cls(ok=False, op=op, error=ServiceError.from_failure(failure))

    @classmethod
    def error_result(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """A failure that did not come from the domain (unknown tag, bad input)."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
