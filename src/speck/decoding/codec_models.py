"""Codec engine entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


class _Absent:
    """Marker for a declared field that is missing from the input mapping."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT: Any = _Absent()


class SpeckEncodeError(Exception):
    """Raised when a decoded value cannot be re-encoded by its codec."""


@dataclass(frozen=True)
class ContextEntry:
    """One step on the path from the root codec to a failing codec."""

    key: str
    codec: Codec
    actual: object


@dataclass(frozen=True)
class DecodeFailure:
    """A single decode failure with the codec path that produced it."""

    value: object
    context: tuple[ContextEntry, ...]
    message: str | None = None


@dataclass(frozen=True)
class DecodeResult:
    """Decoded value, or the failures that prevented decoding."""

    value: object = None
    failures: tuple[DecodeFailure, ...] = field(default_factory=tuple)

    @property
    def is_ok(self) -> bool:
        """Return True when no failures are present."""
        return not self.failures


def success(value: object) -> DecodeResult:
    return DecodeResult(value=value)


def failure(value: object, context: tuple[ContextEntry, ...]) -> DecodeResult:
    return DecodeResult(failures=(DecodeFailure(value=value, context=context),))


def failures(collected: list[DecodeFailure]) -> DecodeResult:
    return DecodeResult(failures=tuple(collected))


def append_context(
    context: tuple[ContextEntry, ...], key: str, codec: Codec, actual: object
) -> tuple[ContextEntry, ...]:
    return (*context, ContextEntry(key=key, codec=codec, actual=actual))


class Codec(ABC):
    """Decode/encode capability for one schema node.

    ``validate`` checks an arbitrary runtime value and returns a
    :class:`DecodeResult`; ``encode`` turns a valid value back into its
    canonical shape. ``is_instance`` is the cheap membership test used to
    pick a union member when encoding.
    """

    name: str

    @abstractmethod
    def is_instance(self, value: object) -> bool:
        """Return True when value already has this codec's shape."""

    @abstractmethod
    def validate(self, value: object, context: tuple[ContextEntry, ...]) -> DecodeResult:
        """Validate value, reporting failures relative to context."""

    def encode(self, value: Any) -> Any:
        return value

    def decode(self, value: object) -> DecodeResult:
        """Validate value from the root of this codec."""
        return self.validate(value, (ContextEntry(key="", codec=self, actual=value),))

    def declared_keys(self) -> frozenset[str] | None:
        """Field names declared by an object shape, or None when unbounded."""
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
