"""Reusable ErrorDetail templates.

``define_error`` binds a code, message template, status and level once;
calling the returned template fills ``{name}`` placeholders and attaches
``path`` / ``meta`` / ``cause`` when given::

    UserMissing = define_error("USER_NOT_FOUND", "User {id} not found", 404)
    UserMissing(id=42).message  # "User 42 not found"
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from microresult.core.types import ErrorDetail, ErrorLevel

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")
_RESERVED_PARAMS = frozenset({"message", "path", "meta", "cause"})


@dataclass(frozen=True)
class ErrorTemplate:
    """Callable builder for one kind of error."""

    code: str
    template: str
    status: int | None = None
    level: ErrorLevel | None = None

    @property
    def placeholders(self) -> tuple[str, ...]:
        """Placeholder names in the template, in first-seen order."""
        return tuple(dict.fromkeys(_PLACEHOLDER.findall(self.template)))

    def interpolate(self, values: Mapping[str, Any]) -> str:
        """Fill placeholders from *values*; unknown placeholders are kept.

        A value of ``None`` counts as missing: the ``{name}`` token stays in
        the message rather than becoming ``"None"`` or ``"null"``.
        """

        def replace(match: re.Match[str]) -> str:
            name = match.group(1)
            value = values.get(name)
            if name in _RESERVED_PARAMS or value is None:
                return match.group(0)
            return str(value)

        return _PLACEHOLDER.sub(replace, self.template)

    def __call__(self, params: Mapping[str, Any] | None = None, /, **kwargs: Any) -> ErrorDetail:
        """Build an ErrorDetail.

        Args:
            params: Placeholder values plus optional ``message`` (verbatim
                override, skips interpolation), ``path``, ``meta``, ``cause``.
            **kwargs: Same keys as *params*; keywords win on conflict.
        """
        values = {**(params or {}), **kwargs}
        fields: dict[str, Any] = {}
        if self.status is not None:
            fields["status"] = self.status
        if self.level:
            fields["level"] = self.level
        for key in ("path", "meta", "cause"):
            if values.get(key):
                fields[key] = values[key]
        message = values.get("message") or self.interpolate(values)
        return ErrorDetail(code=self.code, message=message, **fields)


def define_error(
    code: str,
    template: str,
    status: int | None = None,
    level: ErrorLevel | None = None,
) -> ErrorTemplate:
    """Create an :class:`ErrorTemplate`."""
    return ErrorTemplate(code=code, template=template, status=status, level=level)


BadRequest = define_error("BAD_REQUEST", "Bad request", 400)
Unauthorized = define_error("UNAUTHORIZED", "Authentication required", 401)
Forbidden = define_error("FORBIDDEN", "Access denied", 403)
NotFound = define_error("NOT_FOUND", "Resource not found", 404)
Conflict = define_error("CONFLICT", "Resource conflict", 409)
InternalError = define_error("INTERNAL_ERROR", "Internal server error", 500, "critical")
