"""xstypes: XML Schema primitive type validation and coercion."""

from xstypes.domain.catalog import (
    CATALOG,
    NOT_APPLICABLE,
    check,
    coerce,
    explain,
    list_types,
    lookup,
    validate,
)
from xstypes.domain.errors import (
    CoercionFailed,
    CoercionNotApplicable,
    OutOfRange,
    UnknownType,
    ValidationFailed,
    XsTypeError,
)
from xstypes.domain.sources import CoercionOptions, DurationValue

__version__ = "0.3.0"

__all__ = [
    "CATALOG",
    "NOT_APPLICABLE",
    "CoercionFailed",
    "CoercionNotApplicable",
    "CoercionOptions",
    "DurationValue",
    "OutOfRange",
    "UnknownType",
    "ValidationFailed",
    "XsTypeError",
    "__version__",
    "check",
    "coerce",
    "explain",
    "list_types",
    "lookup",
    "validate",
]
