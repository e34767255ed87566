"""Structured error and metadata types carried by a Result.

An ``ErrorDetail`` field set to ``None`` is *absent*: encoders omit it
rather than writing ``null``, so ``status=0`` or ``path=""`` stay
distinguishable from "not provided".
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ErrorLevel = Literal["info", "warning", "error", "critical"]

# Levels that make a Result count as failed. A missing level counts too.
FAILING_LEVELS: frozenset[str | None] = frozenset({None, "error", "critical"})


class ErrorDetail(BaseModel):
    """One structured error, optionally chained to an underlying cause."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    status: int | None = None
    path: str | None = None
    level: ErrorLevel | None = None
    meta: dict[str, Any] | None = None
    cause: ErrorDetail | None = None

    @property
    def is_failing(self) -> bool:
        """True when this entry's level marks the outcome as an error."""
        return self.level in FAILING_LEVELS

    def chain(self) -> list[ErrorDetail]:
        """Return this error followed by each cause, outermost first."""
        links: list[ErrorDetail] = []
        current: ErrorDetail | None = self
        while current is not None:
            links.append(current)
            current = current.cause
        return links


class Pagination(BaseModel):
    """Well-known ``pagination`` metadata entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    page: int
    page_size: int = Field(alias="pageSize")
    total: int


class ResultMeta(BaseModel):
    """Open-ended side channel attached to a Result.

    ``pagination``, ``traceId`` and ``timestamp`` are typed; any other key
    is kept as-is in the model's extras.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    pagination: Pagination | None = None
    trace_id: str | None = Field(default=None, alias="traceId")
    timestamp: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the provided keys under their wire names.

        Declared keys come first, then extra keys in insertion order.
        """
        return self.model_dump(by_alias=True, exclude_unset=True)
