"""TypeCheckService: validation and coercion behind the ServiceResult contract.

The service owns the coercion options (taken from settings) and converts
engine exceptions into structured errors. Canonical values are rendered
into JSON-safe data: decimals and very wide integers become strings,
everything else is kept.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from xstypes.domain import numeric
from xstypes.domain.bounds import is_integer
from xstypes.domain.catalog import TypeDescriptor, list_types, lookup
from xstypes.domain.errors import XsTypeError
from xstypes.domain.sources import DEFAULT_OPTIONS, CoercionOptions, classify_source
from xstypes.services.result import ServiceResult

if TYPE_CHECKING:
    from xstypes.config.settings import XsSettings

logger = logging.getLogger(__name__)


def render_value(value: Any) -> Any:
    """Convert a canonical representation into a JSON-safe value."""
    if isinstance(value, Decimal):
        return str(value)
    if is_integer(value) and value.bit_length() > numeric.SHORT_INTEGER_BITS:
        return numeric.integer_text(value)
    return value


def describe_descriptor(descriptor: TypeDescriptor) -> dict[str, Any]:
    data: dict[str, Any] = {
        "type": descriptor.name,
        "alias": descriptor.alias,
        "kind": str(descriptor.kind),
        "sources": [str(source) for source in descriptor.sources],
        "description": descriptor.description,
    }
    if descriptor.bounds is not None:
        data["min"], data["max"] = descriptor.bounds
    return data


class TypeCheckService:
    """Validate and coerce values against the built-in catalog.

    Usage::

        svc = TypeCheckService()
        result = svc.check("gDay", 7)
        assert result.data["value"] == "---07"
    """

    def __init__(self, options: CoercionOptions = DEFAULT_OPTIONS) -> None:
        self._options = options

    @classmethod
    def from_settings(cls, settings: XsSettings) -> TypeCheckService:
        return cls(
            CoercionOptions(
                source_encoding=settings.binary.source_encoding,
                base64_line_length=settings.binary.line_length,
            )
        )

    @property
    def options(self) -> CoercionOptions:
        return self._options

    def check(self, type_name: str, value: Any) -> ServiceResult:
        """Coerce *value* if needed and validate it.

        ``data.coerced`` tells whether a coercion rule produced the value.
        """
        op = "check"
        source = classify_source(value)
        try:
            descriptor = lookup(type_name)
            canonical, coerced = descriptor.resolve(value, self._options)
        except XsTypeError as exc:
            logger.debug("check %s failed: %s", type_name, exc.code)
            return ServiceResult.failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "type": descriptor.name,
                "value": render_value(canonical),
                "coerced": coerced,
                "source": str(source),
            },
        )

    def validate(self, type_name: str, representation: Any) -> ServiceResult:
        """Validate *representation* as-is; no coercion is attempted."""
        op = "validate"
        try:
            descriptor = lookup(type_name)
            descriptor.explain(representation)
        except XsTypeError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "type": descriptor.name,
                "value": render_value(representation),
                "valid": True,
            },
        )

    def describe(self, type_name: str) -> ServiceResult:
        op = "describe"
        try:
            descriptor = lookup(type_name)
        except XsTypeError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(ok=True, op=op, data=describe_descriptor(descriptor))

    def list_types(self) -> ServiceResult:
        types = [describe_descriptor(descriptor) for descriptor in list_types()]
        return ServiceResult(ok=True, op="list_types", data={"types": types, "count": len(types)})
