"""Leaf specks.

Every speck below pairs a decode rule with a generation rule:

- literal: exactly one value; generates that value
- string / url_string / email_string: any ``str``; generates text, URLs, emails
- iso_date_time_string: ISO-8601 datetime with seconds and a timezone designator
- float_ / non_negative_float: any number; generates within [-100, 100] / [0, 100]
- int_ / non_negative_int: integral numbers; generates within [-100, 100] / [0, 100]
- boolean, date_time (``datetime`` instances), big_int (unbounded ``int``)
- nil: ``None`` or an absent field
- unknown_record: any string-keyed mapping, kept as-is by strict validation
- unknown: anything at all
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any, TypeVar

from hypothesis import provisional
from hypothesis import strategies as st

from speck.decoding import (
    BIG_INT,
    BOOLEAN,
    DATE_TIME,
    INT,
    ISO_DATE_TIME_STRING,
    NULL,
    NUMBER,
    STRING,
    UNKNOWN,
    UNKNOWN_RECORD,
    LiteralCodec,
    UnionCodec,
)
from speck.generation import iso_date_time_strings, nil_values, unknown_records, unknown_values

from .speck_models import (
    ObjectSpeck,
    ScalarSpeck,
    SpeckDefinitionError,
    make_object_speck,
    make_scalar_speck,
)

L = TypeVar("L", str, int, float, bool)


def literal(value: L) -> ScalarSpeck[L]:
    """Speck for exactly one ``str``, number or ``bool`` value."""
    if not isinstance(value, (str, int, float, bool)):
        raise SpeckDefinitionError(
            f"literal() accepts str, int, float or bool values, got {type(value).__name__}."
        )
    return make_scalar_speck(LiteralCodec(value), st.just(value))


string: ScalarSpeck[str] = make_scalar_speck(STRING, st.text())

# Validation only checks for a string; generation produces URLs.
url_string: ScalarSpeck[str] = make_scalar_speck(STRING, provisional.urls())

# Validation only checks for a string; generation produces email addresses.
email_string: ScalarSpeck[str] = make_scalar_speck(STRING, st.emails())

iso_date_time_string: ScalarSpeck[str] = make_scalar_speck(
    ISO_DATE_TIME_STRING, iso_date_time_strings()
)

# TODO: make the generation bounds of float_/int_ parameters instead of fixed at -100..100.
float_: ScalarSpeck[float] = make_scalar_speck(
    NUMBER, st.floats(min_value=-100, max_value=100)
)

# Validation does not check the sign; only generation is bounded at 0.
non_negative_float: ScalarSpeck[float] = make_scalar_speck(
    NUMBER, st.floats(min_value=0, max_value=100)
)

#: Deprecated alias of :data:`non_negative_float`.
positive_float = non_negative_float

int_: ScalarSpeck[int] = make_scalar_speck(INT, st.integers(min_value=-100, max_value=100))

non_negative_int: ScalarSpeck[int] = make_scalar_speck(
    INT, st.integers(min_value=0, max_value=100)
)

#: Deprecated alias of :data:`non_negative_int`.
positive_int = non_negative_int

boolean: ScalarSpeck[bool] = make_scalar_speck(BOOLEAN, st.booleans())

date_time: ScalarSpeck[datetime] = make_scalar_speck(DATE_TIME, st.datetimes())

big_int: ScalarSpeck[int] = make_scalar_speck(BIG_INT, st.integers())

nil: ScalarSpeck[None] = make_scalar_speck(NULL, nil_values())

unknown_record: ObjectSpeck[dict[str, Any]] = make_object_speck(
    UNKNOWN_RECORD, unknown_records(), allows_unknown=True
)

unknown: ScalarSpeck[Any] = make_scalar_speck(UNKNOWN, unknown_values())


def literal_string_enum(values: Sequence[str]) -> ScalarSpeck[str]:
    """Speck for one of two or more string literals."""
    return _literal_enum(values, "literal_string_enum", lambda value: isinstance(value, str))


def literal_number_enum(values: Sequence[float]) -> ScalarSpeck[float]:
    """Speck for one of two or more number literals."""
    return _literal_enum(
        values,
        "literal_number_enum",
        lambda value: isinstance(value, (int, float)) and not isinstance(value, bool),
    )


def _literal_enum(values: Sequence[Any], label: str, accepts: Any) -> ScalarSpeck[Any]:
    if isinstance(values, str) or not isinstance(values, Sequence):
        raise SpeckDefinitionError(f"{label}() expects a sequence of literal values.")
    literals = list(values)
    if len(literals) < 2:
        raise SpeckDefinitionError(
            f"{label}() needs at least 2 values; use literal() for a single value."
        )
    for value in literals:
        if not accepts(value):
            raise SpeckDefinitionError(f"{label}() got an unsupported value: {value!r}.")
    codec = UnionCodec([LiteralCodec(value) for value in literals])
    return make_scalar_speck(codec, st.sampled_from(literals))
