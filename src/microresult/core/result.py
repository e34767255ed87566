"""Result — the uniform outcome value.

INVARIANT: a Result is never mutated after construction. ``map`` and
``flat_map`` always build a new instance, and neither lets an exception
from the caller's function escape: it becomes a ``MAP_ERROR`` or
``FLATMAP_ERROR`` entry instead.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from microresult.core.types import ErrorDetail, ResultMeta

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

STATUS_SERVER_ERROR = 500

MAP_ERROR = "MAP_ERROR"
FLATMAP_ERROR = "FLATMAP_ERROR"


class Result(BaseModel, Generic[T]):
    """Outcome of an operation: payload, structured errors, status, metadata.

    Attributes:
        data: Payload. ``None`` means "no data", not failure.
        errors: Reported conditions. Empty means success.
        status: Explicit transport status; wins over any inference.
        meta: Optional side-channel metadata. An empty ``ResultMeta`` is
            stored as ``None``.
    """

    model_config = ConfigDict(frozen=True)

    data: T | None = None
    errors: list[ErrorDetail] = Field(default_factory=list)
    status: int | None = None
    meta: ResultMeta | None = None

    @field_validator("meta")
    @classmethod
    def _empty_meta_is_absent(cls, meta: ResultMeta | None) -> ResultMeta | None:
        # Nothing to put on the wire, so it must compare equal after a round-trip.
        if meta is not None and not meta.to_dict():
            return None
        return meta

    # --- Queries ---

    def is_ok(self) -> bool:
        """True iff no errors were reported (warnings included)."""
        return not self.errors

    def is_ok_with_data(self) -> bool:
        """True iff no errors were reported and a payload is present."""
        return not self.errors and self.data is not None

    def is_error(self) -> bool:
        """True iff some entry is error-level (missing, ``error`` or ``critical``)."""
        return any(e.is_failing for e in self.errors)

    def has_warning(self) -> bool:
        """True iff some entry has level ``warning``."""
        return any(e.level == "warning" for e in self.errors)

    # --- Transforms ---

    def map(self, fn: Callable[[T], U]) -> Result[U]:
        """Apply *fn* to the payload and wrap its return value."""
        shortcut = self._shortcut()
        if shortcut is not None:
            return shortcut
        try:
            value = fn(self.data)  # type: ignore[arg-type]
        except Exception as exc:
            logger.debug("map callback raised", exc_info=True)
            return self._callback_failure(MAP_ERROR, exc, "Error in map function")
        return Result(data=value, status=self.status, meta=self.meta)

    def flat_map(self, fn: Callable[[T], Result[U]]) -> Result[U]:
        """Apply *fn* to the payload and return its Result unchanged."""
        shortcut = self._shortcut()
        if shortcut is not None:
            return shortcut
        try:
            chained = fn(self.data)  # type: ignore[arg-type]
            if not isinstance(chained, Result):
                msg = f"flat_map callback must return a Result, got {type(chained).__name__}"
                raise TypeError(msg)
        except Exception as exc:
            logger.debug("flat_map callback raised", exc_info=True)
            return self._callback_failure(FLATMAP_ERROR, exc, "Error in flatMap function")
        return chained

    def _shortcut(self) -> Result[Any] | None:
        """Return the propagated Result when there is nothing to transform."""
        if self.errors:
            return Result(data=None, errors=self.errors, status=self.status, meta=self.meta)
        if self.data is None:
            return Result(data=None, status=self.status, meta=self.meta)
        return None

    def _callback_failure(self, code: str, exc: Exception, fallback: str) -> Result[Any]:
        error = ErrorDetail(
            code=code,
            message=str(exc) or fallback,
            status=STATUS_SERVER_ERROR,
            level="error",
        )
        return Result(data=None, errors=[error], status=STATUS_SERVER_ERROR, meta=self.meta)

    # --- Serialization ---

    def to_dict(self, *, compact: bool = False) -> dict[str, Any]:
        """Encode to a JSON-compatible dict (see :mod:`microresult.serialization`)."""
        from microresult.serialization import encode

        return encode(self, compact=compact)

    def to_json(self, *, compact: bool = False, indent: int | None = None) -> str:
        """Encode to a JSON string."""
        from microresult.serialization import to_json

        return to_json(self, compact=compact, indent=indent)


def create_result(
    data: Any,
    errors: Sequence[ErrorDetail | Mapping[str, Any]],
    status: int | None = None,
    meta: ResultMeta | Mapping[str, Any] | None = None,
) -> Result[Any]:
    """Positional constructor: ``(data, errors, status?, meta?)``."""
    return Result(data=data, errors=list(errors), status=status, meta=meta)
