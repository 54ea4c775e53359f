"""The built-in type catalog and the engine's public operations.

Each :class:`TypeDescriptor` pairs a representation kind and a validation
predicate with an ordered tuple of coercion rules keyed by
:class:`~xstypes.domain.sources.SourceKind`.

INVARIANT: The catalog is built once at import time and is read-only.
INVARIANT: ``check`` never returns a coerced value that fails validation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, StrEnum
from types import MappingProxyType
from typing import Any

from xstypes.domain import binary, numeric, temporal, uri
from xstypes.domain.bounds import INTEGER_BOUNDS, bounded, in_range, is_integer
from xstypes.domain.duration import duration_lexical
from xstypes.domain.errors import (
    CoercionFailed,
    CoercionNotApplicable,
    OutOfRange,
    UnknownType,
    ValidationFailed,
)
from xstypes.domain.patterns import LEXICAL_PATTERNS, matcher
from xstypes.domain.sources import (
    DEFAULT_OPTIONS,
    CoercionOptions,
    DurationValue,
    SourceKind,
    classify_source,
)

logger = logging.getLogger(__name__)

Converter = Callable[[Any, CoercionOptions], Any]


class RepresentationKind(StrEnum):
    """In-memory representation used by a type's canonical values."""

    TEXT = "text"
    BOOLEAN = "boolean"
    NATIVE_INTEGER = "native-bounded-integer"
    ARBITRARY_INTEGER = "arbitrary-integer"
    ARBITRARY_DECIMAL = "arbitrary-decimal"


class NotApplicable(Enum):
    """Marker returned by :func:`coerce` when no rule matches the value."""

    NOT_APPLICABLE = "not_applicable"

    def __repr__(self) -> str:
        return "NOT_APPLICABLE"


NOT_APPLICABLE = NotApplicable.NOT_APPLICABLE


def _has_shape(kind: RepresentationKind, value: Any) -> bool:
    if kind is RepresentationKind.TEXT:
        return isinstance(value, str)
    if kind is RepresentationKind.BOOLEAN:
        return isinstance(value, bool)
    if kind is RepresentationKind.ARBITRARY_DECIMAL:
        return isinstance(value, Decimal)
    return is_integer(value)


@dataclass(frozen=True)
class CoercionRule:
    """Converts values tagged *source* into a canonical representation."""

    source: SourceKind
    convert: Converter


@dataclass(frozen=True)
class TypeDescriptor:
    """One catalog type: representation, predicate, and coercion rules."""

    name: str
    kind: RepresentationKind
    predicate: Callable[[Any], bool]
    coercions: tuple[CoercionRule, ...] = ()
    description: str = ""

    @property
    def alias(self) -> str:
        """Library-style alias, e.g. ``XsDateTime`` for ``dateTime``."""
        return "Xs" + self.name[0].upper() + self.name[1:]

    @property
    def sources(self) -> tuple[SourceKind, ...]:
        return tuple(rule.source for rule in self.coercions)

    @property
    def bounds(self) -> tuple[int, int] | None:
        return INTEGER_BOUNDS.get(self.name)

    def has_shape(self, value: Any) -> bool:
        return _has_shape(self.kind, value)

    def validate(self, value: Any) -> bool:
        return self.has_shape(value) and self.predicate(value)

    def explain(self, value: Any) -> None:
        """Raise the structured failure for *value*, or return if it is valid."""
        if not self.has_shape(value):
            raise ValidationFailed(
                self.name,
                f"{self.name} expects a {self.kind} value, got {type(value).__name__}",
                {"expected": str(self.kind), "got": type(value).__name__},
            )
        if self.predicate(value):
            return
        if self.kind is RepresentationKind.TEXT:
            pattern = LEXICAL_PATTERNS.get(self.name)
            raise ValidationFailed(
                self.name,
                f"{value!r} is not a valid {self.name}",
                {"pattern": pattern.pattern if pattern else None},
            )
        if self.kind is RepresentationKind.ARBITRARY_DECIMAL and numeric.is_special(value):
            raise ValidationFailed(self.name, f"{self.name} does not allow {value}")
        detail: dict[str, Any] = {}
        if self.bounds is not None:
            detail = {"min": self.bounds[0], "max": self.bounds[1]}
        raise OutOfRange(
            self.name,
            f"{numeric.short_number(value)} is out of range for {self.name}",
            detail,
        )

    def rule_for(self, source: SourceKind) -> CoercionRule | None:
        for rule in self.coercions:
            if rule.source is source:
                return rule
        return None

    def coerce(self, value: Any, options: CoercionOptions = DEFAULT_OPTIONS) -> Any:
        """Apply the matching rule, or return :data:`NOT_APPLICABLE`."""
        source = classify_source(value)
        rule = self.rule_for(source)
        if rule is None:
            return NOT_APPLICABLE
        try:
            result = rule.convert(value, options)
        except CoercionFailed:
            raise
        except (ValueError, TypeError, ArithmeticError) as exc:
            raise CoercionFailed(
                self.name,
                f"Coercion from {source} to {self.name} failed: {exc}",
                {"source": str(source)},
            ) from exc
        logger.debug("Coerced %s value to %s", source, self.name)
        return result

    def resolve(
        self, value: Any, options: CoercionOptions = DEFAULT_OPTIONS
    ) -> tuple[Any, bool]:
        """Return ``(canonical, coerced)`` for *value* or raise.

        *coerced* is True only when a coercion rule produced *canonical*.
        """
        if self.validate(value):
            return value, False
        candidate = self.coerce(value, options)
        if candidate is NOT_APPLICABLE:
            self.explain(value)
            return value, False
        self.explain(candidate)
        return candidate, True

    def check(self, value: Any, options: CoercionOptions = DEFAULT_OPTIONS) -> Any:
        """Return the canonical representation of *value* or raise."""
        return self.resolve(value, options)[0]


# ---------------------------------------------------------------------------
# Rule builders
# ---------------------------------------------------------------------------


def _rule(source: SourceKind, func: Callable[[Any], Any]) -> CoercionRule:
    """Rule for a converter that needs no options."""
    return CoercionRule(source, lambda value, _options: func(value))


def _integer_rules(name: str) -> tuple[CoercionRule, ...]:
    return (
        _rule(SourceKind.INTEGER, int),
        _rule(SourceKind.TEXT, lambda text: numeric.parse_integer_text(name, text)),
    )


def _decimal_rules(name: str) -> tuple[CoercionRule, ...]:
    return (
        _rule(SourceKind.FLOAT, numeric.decimal_from_float),
        _rule(SourceKind.INTEGER, numeric.decimal_from_integer),
        _rule(SourceKind.TEXT, lambda text: numeric.parse_decimal_text(name, text)),
    )


def _text_type(
    name: str,
    description: str,
    coercions: tuple[CoercionRule, ...] = (),
) -> TypeDescriptor:
    return TypeDescriptor(
        name=name,
        kind=RepresentationKind.TEXT,
        predicate=matcher(name),
        coercions=coercions,
        description=description,
    )


def _native_integer(name: str, description: str) -> TypeDescriptor:
    low, high = bounded(name)
    return TypeDescriptor(
        name=name,
        kind=RepresentationKind.NATIVE_INTEGER,
        predicate=lambda value: in_range(value, low, high),
        description=description,
    )


def _arbitrary_integer(
    name: str,
    description: str,
    predicate: Callable[[int], bool],
) -> TypeDescriptor:
    return TypeDescriptor(
        name=name,
        kind=RepresentationKind.ARBITRARY_INTEGER,
        predicate=predicate,
        coercions=_integer_rules(name),
        description=description,
    )


def _bounded_arbitrary_integer(name: str, description: str) -> TypeDescriptor:
    low, high = bounded(name)
    return _arbitrary_integer(name, description, lambda value: in_range(value, low, high))


def _decimal_type(
    name: str,
    description: str,
    predicate: Callable[[Decimal], bool],
) -> TypeDescriptor:
    return TypeDescriptor(
        name=name,
        kind=RepresentationKind.ARBITRARY_DECIMAL,
        predicate=predicate,
        coercions=_decimal_rules(name),
        description=description,
    )


def _always(_value: Any) -> bool:
    return True


def _build_catalog() -> tuple[TypeDescriptor, ...]:
    return (
        TypeDescriptor(
            "string", RepresentationKind.TEXT, _always, description="Any text."
        ),
        _arbitrary_integer(
            "integer", "Arbitrary-size integer.", _always
        ),
        _arbitrary_integer(
            "positiveInteger", "Arbitrary-size integer > 0.", numeric.is_positive
        ),
        _arbitrary_integer(
            "nonPositiveInteger", "Arbitrary-size integer <= 0.", numeric.is_non_positive
        ),
        _arbitrary_integer(
            "negativeInteger", "Arbitrary-size integer < 0.", numeric.is_negative
        ),
        _arbitrary_integer(
            "nonNegativeInteger", "Arbitrary-size integer >= 0.", numeric.is_non_negative
        ),
        _bounded_arbitrary_integer("long", "64-bit signed integer."),
        _bounded_arbitrary_integer("unsignedLong", "64-bit unsigned integer."),
        _native_integer("int", "32-bit signed integer."),
        _native_integer("unsignedInt", "32-bit unsigned integer."),
        _native_integer("short", "16-bit signed integer."),
        _native_integer("unsignedShort", "16-bit unsigned integer."),
        _native_integer("byte", "8-bit signed integer."),
        _native_integer("unsignedByte", "8-bit unsigned integer."),
        TypeDescriptor(
            "boolean", RepresentationKind.BOOLEAN, _always, description="True or false."
        ),
        _decimal_type(
            "float",
            "Single-precision float; NaN and infinities allowed, inclusive bounds.",
            numeric.float_in_range,
        ),
        _decimal_type(
            "double",
            "Double-precision float; NaN and infinities allowed, exclusive bounds.",
            numeric.double_in_range,
        ),
        _decimal_type(
            "decimal", "Arbitrary-precision decimal, finite only.", numeric.is_finite_decimal
        ),
        _text_type(
            "duration",
            "Duration as [-]PnYnMnDTnHnMn[.f]S.",
            (
                _rule(SourceKind.DURATION, duration_lexical),
                _rule(
                    SourceKind.TIMEDELTA,
                    lambda delta: duration_lexical(DurationValue.from_timedelta(delta)),
                ),
            ),
        ),
        _text_type(
            "dateTime",
            "Date and time with optional fraction and timezone.",
            (_rule(SourceKind.DATETIME, temporal.datetime_lexical),),
        ),
        _text_type(
            "time",
            "Time of day with optional fraction and timezone.",
            (
                _rule(SourceKind.DATETIME, temporal.time_lexical),
                _rule(SourceKind.TIME, temporal.time_lexical),
            ),
        ),
        _text_type(
            "date",
            "Calendar date with optional timezone.",
            (
                _rule(SourceKind.DATETIME, temporal.date_lexical),
                _rule(SourceKind.DATE, temporal.date_lexical),
            ),
        ),
        _text_type(
            "gYearMonth",
            "Year and month, YYYY-MM.",
            (
                _rule(SourceKind.INT_PAIR, temporal.gyearmonth_from_pair),
                _rule(SourceKind.DATETIME, temporal.gyearmonth_lexical),
                _rule(SourceKind.DATE, temporal.gyearmonth_lexical),
            ),
        ),
        _text_type(
            "gYear",
            "Year, YYYY.",
            (
                _rule(SourceKind.DATETIME, temporal.gyear_lexical),
                _rule(SourceKind.DATE, temporal.gyear_lexical),
            ),
        ),
        _text_type(
            "gMonthDay",
            "Recurring month and day, --MM-DD.",
            (
                _rule(SourceKind.INT_PAIR, temporal.gmonthday_from_pair),
                _rule(SourceKind.DATETIME, temporal.gmonthday_lexical),
                _rule(SourceKind.DATE, temporal.gmonthday_lexical),
            ),
        ),
        _text_type(
            "gDay",
            "Recurring day of month, ---DD.",
            (
                _rule(SourceKind.INTEGER, temporal.gday_from_integer),
                _rule(SourceKind.DATETIME, temporal.gday_lexical),
                _rule(SourceKind.DATE, temporal.gday_lexical),
            ),
        ),
        _text_type(
            "gMonth",
            "Recurring month, --MM.",
            (
                _rule(SourceKind.INTEGER, temporal.gmonth_from_integer),
                _rule(SourceKind.DATETIME, temporal.gmonth_lexical),
                _rule(SourceKind.DATE, temporal.gmonth_lexical),
            ),
        ),
        _text_type(
            "base64Binary",
            "Base64 text; streams and bytes are UTF-8 encoded first.",
            (
                CoercionRule(SourceKind.BINARY_STREAM, binary.base64_from_stream),
                CoercionRule(SourceKind.BYTES, binary.base64_from_bytes),
            ),
        ),
        _text_type(
            "anyURI",
            "Absolute URI with a scheme followed by ://.",
            (_rule(SourceKind.URI, uri.uri_text),),
        ),
    )


CATALOG: MappingProxyType[str, TypeDescriptor] = MappingProxyType(
    {descriptor.name: descriptor for descriptor in _build_catalog()}
)

_ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {descriptor.alias: name for name, descriptor in CATALOG.items()}
)

_QNAME_PREFIXES = ("xs:", "xsd:")


# ---------------------------------------------------------------------------
# Public operations
# ---------------------------------------------------------------------------


def lookup(type_name: str) -> TypeDescriptor:
    """Resolve ``dateTime``, ``xs:dateTime`` or ``XsDateTime`` to its descriptor."""
    name = type_name
    for prefix in _QNAME_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix) :]
            break
    descriptor = CATALOG.get(name)
    if descriptor is None:
        alias_target = _ALIASES.get(name)
        if alias_target is None:
            raise UnknownType(type_name)
        descriptor = CATALOG[alias_target]
    return descriptor


def list_types() -> list[TypeDescriptor]:
    return list(CATALOG.values())


def validate(type_name: str, representation: Any) -> bool:
    """Check *representation* against the type's predicate (no coercion)."""
    return lookup(type_name).validate(representation)


def explain(type_name: str, representation: Any) -> None:
    """Raise ``ValidationFailed``/``OutOfRange`` if *representation* is invalid."""
    lookup(type_name).explain(representation)


def coerce(
    type_name: str,
    value: Any,
    options: CoercionOptions | None = None,
) -> Any:
    """Convert *value* with the type's matching rule.

    Returns :data:`NOT_APPLICABLE` when no rule matches *value*'s shape.
    The result is not validated; use :func:`check` for the full flow.
    """
    return lookup(type_name).coerce(value, options or DEFAULT_OPTIONS)


def check(
    type_name: str,
    value: Any,
    options: CoercionOptions | None = None,
) -> Any:
    """Coerce if needed, validate, and return the canonical representation."""
    return lookup(type_name).check(value, options or DEFAULT_OPTIONS)


def require_coercion(
    type_name: str,
    value: Any,
    options: CoercionOptions | None = None,
) -> Any:
    """Like :func:`coerce` but raises ``CoercionNotApplicable`` instead of a marker."""
    descriptor = lookup(type_name)
    result = descriptor.coerce(value, options or DEFAULT_OPTIONS)
    if result is NOT_APPLICABLE:
        source = classify_source(value)
        raise CoercionNotApplicable(
            descriptor.name,
            f"No coercion from {source} to {descriptor.name}",
            {"source": str(source), "accepted": [str(s) for s in descriptor.sources]},
        )
    return result
