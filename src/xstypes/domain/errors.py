"""Structured failures raised by the type engine.

Every failure carries a stable ``code`` so the service layer can turn it
into a :class:`~xstypes.services.result.ServiceError` without inspecting
message text.
"""

from __future__ import annotations

from typing import Any


class XsTypeError(Exception):
    """Base class for all engine failures."""

    code = "XS_TYPE_ERROR"

    def __init__(
        self,
        type_name: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.type_name = type_name
        self.message = message
        self.detail: dict[str, Any] = detail or {}


class ValidationFailed(XsTypeError):
    """The representation does not satisfy the type's predicate."""

    code = "VALIDATION_FAILED"


class OutOfRange(ValidationFailed):
    """A numeric value of the right kind falls outside the type's bounds."""

    code = "OUT_OF_RANGE"


class CoercionNotApplicable(XsTypeError):
    """No coercion rule is registered for the value's source shape."""

    code = "COERCION_NOT_APPLICABLE"


class CoercionFailed(XsTypeError):
    """A matching coercion rule was attempted but could not finish."""

    code = "COERCION_FAILED"


class UnknownType(XsTypeError, LookupError):
    """The type name is not part of the catalog."""

    code = "UNKNOWN_TYPE"

    def __init__(self, type_name: str) -> None:
        super().__init__(type_name, f"Unknown type: {type_name}")
