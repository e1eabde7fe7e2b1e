"""Speck entities: a codec paired with a generation strategy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from hypothesis.strategies import SearchStrategy

from speck.decoding import Codec

T = TypeVar("T")


class SpeckDefinitionError(Exception):
    """Raised when a speck is built from arguments it cannot accept."""


@dataclass(frozen=True)
class ScalarSpeck(Generic[T]):
    """Speck for values that are not key/value shapes (or may not be).

    Scalar specks cannot take part in ``intersection``.
    """

    codec: Codec
    strategy: SearchStrategy[T]

    is_object_kind: ClassVar[bool] = False

    @property
    def type_name(self) -> str:
        """Readable name of the type this speck describes."""
        return self.codec.name


@dataclass(frozen=True)
class ObjectSpeck(Generic[T]):
    """Speck for key/value shapes; these can be combined with ``intersection``."""

    codec: Codec
    strategy: SearchStrategy[T]
    # When True, validation never strips fields missing from the declared shape.
    allows_unknown: bool = False

    is_object_kind: ClassVar[bool] = True

    @property
    def type_name(self) -> str:
        """Readable name of the type this speck describes."""
        return self.codec.name


Speck = ScalarSpeck[T] | ObjectSpeck[T]

AnySpeck = ScalarSpeck[Any] | ObjectSpeck[Any]


def make_scalar_speck(codec: Codec, strategy: SearchStrategy[T]) -> ScalarSpeck[T]:
    return ScalarSpeck(codec=codec, strategy=strategy)


def make_object_speck(
    codec: Codec, strategy: SearchStrategy[T], allows_unknown: bool = False
) -> ObjectSpeck[T]:
    return ObjectSpeck(codec=codec, strategy=strategy, allows_unknown=allows_unknown)


def is_speck(value: object) -> bool:
    return isinstance(value, (ScalarSpeck, ObjectSpeck))


def require_speck(value: object, role: str) -> AnySpeck:
    if not is_speck(value):
        raise SpeckDefinitionError(f"{role} must be a speck, got {type(value).__name__}.")
    return value  # type: ignore[return-value]


def require_object_speck(value: object, role: str) -> ObjectSpeck[Any]:
    speck = require_speck(value, role)
    if not isinstance(speck, ObjectSpeck):
        raise SpeckDefinitionError(
            f"{role} must be an object speck, got a scalar speck of type {speck.type_name}."
        )
    return speck
