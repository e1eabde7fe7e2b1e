"""Leaf codecs: predicates, literals and refinements."""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from .codec_models import ABSENT, Codec, ContextEntry, DecodeResult, failure, success

# Seconds precision and a timezone designator, e.g. 2001-01-01T01:23:45Z or
# 2001-01-01T01:23:45+01:00.
ISO_DATETIME_STRING_PATTERN = re.compile(
    r"\d{4}-[01]\d-[0-3]\dT[0-2]\d:[0-5]\d:[0-5]\d([+-][0-2]\d:[0-5]\d|Z)"
)

LiteralValue = str | int | float | bool


class PredicateCodec(Codec):
    """Codec whose whole decode rule is a type predicate."""

    def __init__(self, name: str, predicate: Callable[[object], bool]) -> None:
        self.name = name
        self._predicate = predicate

    def is_instance(self, value: object) -> bool:
        return self._predicate(value)

    def validate(self, value: object, context: tuple[ContextEntry, ...]) -> DecodeResult:
        if self._predicate(value):
            return success(value)
        return failure(value, context)


class LiteralCodec(Codec):
    """Accepts exactly one literal value."""

    def __init__(self, value: LiteralValue) -> None:
        self.value = value
        self.name = json.dumps(value)

    def is_instance(self, value: object) -> bool:
        return strictly_equal(value, self.value)

    def validate(self, value: object, context: tuple[ContextEntry, ...]) -> DecodeResult:
        if strictly_equal(value, self.value):
            return success(value)
        return failure(value, context)


class RefinementCodec(Codec):
    """Narrows a base codec with an extra predicate under a brand name."""

    def __init__(self, base: Codec, predicate: Callable[[Any], bool], name: str) -> None:
        self.base = base
        self._predicate = predicate
        self.name = name

    def is_instance(self, value: object) -> bool:
        return self.base.is_instance(value) and self._predicate(value)

    def validate(self, value: object, context: tuple[ContextEntry, ...]) -> DecodeResult:
        result = self.base.validate(value, context)
        if not result.is_ok:
            return result
        if not self._predicate(result.value):
            return failure(value, context)
        return result

    def encode(self, value: Any) -> Any:
        return self.base.encode(value)

    def declared_keys(self) -> frozenset[str] | None:
        return self.base.declared_keys()


def strictly_equal(left: object, right: object) -> bool:
    """Equality that never treats booleans as numbers or numbers as strings."""
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if is_number(left) and is_number(right):
        return left == right
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    return False


def is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integral(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def is_big_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_nil(value: object) -> bool:
    return value is None or value is ABSENT


def is_unknown_record(value: object) -> bool:
    """Any mapping. Key types are left to the codecs that read the keys."""
    return isinstance(value, Mapping)


def _is_iso_date_time_string(value: str) -> bool:
    return ISO_DATETIME_STRING_PATTERN.search(value) is not None


STRING = PredicateCodec("string", lambda value: isinstance(value, str))
NUMBER = PredicateCodec("number", is_number)
BOOLEAN = PredicateCodec("boolean", lambda value: isinstance(value, bool))
NULL = PredicateCodec("null", is_nil)
UNKNOWN = PredicateCodec("unknown", lambda value: True)
UNKNOWN_RECORD = PredicateCodec("UnknownRecord", is_unknown_record)
DATE_TIME = PredicateCodec("Date", lambda value: isinstance(value, datetime))
BIG_INT = PredicateCodec("bigint", is_big_integer)
INT = RefinementCodec(NUMBER, is_integral, "Int")
ISO_DATE_TIME_STRING = RefinementCodec(STRING, _is_iso_date_time_string, "IsoDateTimeString")
