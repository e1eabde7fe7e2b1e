"""Higher order specks built from other specks."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from hypothesis import strategies as st

from speck.decoding import (
    STRING,
    ArrayCodec,
    Codec,
    InterfaceCodec,
    IntersectionCodec,
    PartialCodec,
    RecordCodec,
    UnionCodec,
    non_empty_array as non_empty_array_codec,
)

from .speck_models import (
    AnySpeck,
    ObjectSpeck,
    ScalarSpeck,
    SpeckDefinitionError,
    make_object_speck,
    make_scalar_speck,
    require_object_speck,
    require_speck,
)

# Generation length bounds for non_empty_array. The upper bound is a
# deliberate cap; raise it here if larger samples are needed.
NON_EMPTY_ARRAY_MIN_SIZE = 1
NON_EMPTY_ARRAY_MAX_SIZE = 5


def array(speck: AnySpeck) -> ScalarSpeck[list[Any]]:
    """Speck for a list whose every element matches speck."""
    item = require_speck(speck, "array() item")
    return make_scalar_speck(ArrayCodec(item.codec), st.lists(item.strategy))


def non_empty_array(speck: AnySpeck) -> ScalarSpeck[list[Any]]:
    """Like :func:`array` but at least one element is required."""
    item = require_speck(speck, "non_empty_array() item")
    return make_scalar_speck(
        non_empty_array_codec(item.codec),
        st.lists(
            item.strategy,
            min_size=NON_EMPTY_ARRAY_MIN_SIZE,
            max_size=NON_EMPTY_ARRAY_MAX_SIZE,
        ),
    )


def record(key_speck: AnySpeck, value_speck: AnySpeck) -> ObjectSpeck[dict[str, Any]]:
    """Speck for a mapping from strings to values matching value_speck.

    ``record(string, float_)`` describes ``dict[str, float]``.
    """
    key = require_speck(key_speck, "record() key")
    if key.codec is not STRING:
        raise SpeckDefinitionError(
            f"record() keys must be a string speck, got {key.type_name}."
        )
    value = require_speck(value_speck, "record() value")
    return make_object_speck(
        RecordCodec(key.codec, value.codec),
        st.dictionaries(key.strategy, value.strategy),
    )


def type_(fields: Mapping[str, AnySpeck]) -> ObjectSpeck[dict[str, Any]]:
    """Speck for a mapping in which every listed field is required.

    ```python
    Url = s.type_({
        "type": s.literal("Url"),
        "id": s.url_string,
    })
    ```
    """
    codecs, strategies = _split_fields(fields, "type_()")
    return make_object_speck(InterfaceCodec(codecs), st.fixed_dictionaries(strategies))


def partial(fields: Mapping[str, AnySpeck]) -> ObjectSpeck[dict[str, Any]]:
    """Speck for a mapping in which every listed field is optional.

    A listed field may be left out, set to ``None``, or set to a value
    that matches its speck; the first two are treated the same.
    Generated values may leave any field out.
    """
    codecs, strategies = _split_fields(fields, "partial()")
    return make_object_speck(PartialCodec(codecs), st.fixed_dictionaries({}, optional=strategies))


def intersection(specks: Sequence[AnySpeck]) -> ObjectSpeck[dict[str, Any]]:
    """Combine two object specks; a value must match both.

    ``intersection([type_({"abc": string}), partial({"def": float_})])``
    requires ``abc`` and allows ``def``. Only object specks can be
    intersected: there is no value that is both ``3`` and ``None``.
    Generated values merge a sample of each side, the second side winning
    on shared keys.
    """
    first, second = _pair(specks, "intersection()")
    speck_a = require_object_speck(first, "intersection() member")
    speck_b = require_object_speck(second, "intersection() member")
    strategy = st.tuples(speck_a.strategy, speck_b.strategy).map(
        lambda values: {**values[0], **values[1]}
    )
    return make_object_speck(
        IntersectionCodec([speck_a.codec, speck_b.codec]),
        strategy,
        # Either side accepting unknown fields makes the whole shape accept them.
        allows_unknown=speck_a.allows_unknown or speck_b.allows_unknown,
    )


def union_objects(specks: Sequence[AnySpeck]) -> ObjectSpeck[dict[str, Any]]:
    """Like :func:`union` for two object specks; the result stays an object speck."""
    first, second = _pair(specks, "union_objects()")
    speck_a = require_object_speck(first, "union_objects() member")
    speck_b = require_object_speck(second, "union_objects() member")
    return make_object_speck(
        UnionCodec([speck_a.codec, speck_b.codec]),
        st.one_of(speck_a.strategy, speck_b.strategy),
        allows_unknown=speck_a.allows_unknown or speck_b.allows_unknown,
    )


def union(specks: Sequence[AnySpeck]) -> ScalarSpeck[Any]:
    """A speck that matches one speck or another.

    The result is always a scalar speck, even for two object specks, so it
    cannot be passed to :func:`intersection`. Use :func:`union_objects`
    for that.

    ```python
    >>> NumberOrString = s.union([s.string, s.int_])
    >>> s.validate(NumberOrString, "1")
    '1'
    >>> s.validate(NumberOrString, True)
    SpeckValidationErrors('Validation Error')
    ```
    """
    first, second = _pair(specks, "union()")
    speck_a = require_speck(first, "union() member")
    speck_b = require_speck(second, "union() member")
    return make_scalar_speck(
        UnionCodec([speck_a.codec, speck_b.codec]),
        st.one_of(speck_a.strategy, speck_b.strategy),
    )


def pick_requireds(
    fields: Mapping[str, AnySpeck], required_fields: Sequence[str]
) -> ObjectSpeck[dict[str, Any]]:
    """Split fields into required ones and optional ones.

    ```python
    FIELDS = {
        "type": s.literal("Spaceship"),
        "fuel": s.non_negative_float,
        "crew": s.array(Person),
        "name": s.string,
    }
    MannedShip = s.pick_requireds(FIELDS, ["type", "fuel", "crew"])  # name is optional
    SemiAutonomousShip = s.pick_requireds(FIELDS, ["type", "fuel"])  # crew, name optional
    ```
    """
    if not isinstance(fields, Mapping):
        raise SpeckDefinitionError("pick_requireds() fields must be a mapping.")
    if isinstance(required_fields, str):
        raise SpeckDefinitionError("pick_requireds() required fields must be a list of names.")
    unknown_names = [name for name in required_fields if name not in fields]
    if unknown_names:
        raise SpeckDefinitionError(
            f"pick_requireds() required fields are not defined: {', '.join(unknown_names)}"
        )
    required = set(required_fields)
    requireds = type_({key: speck for key, speck in fields.items() if key in required})
    optionals = partial({key: speck for key, speck in fields.items() if key not in required})
    return intersection([requireds, optionals])


def _split_fields(
    fields: Mapping[str, AnySpeck], label: str
) -> tuple[dict[str, Codec], dict[str, st.SearchStrategy[Any]]]:
    if not isinstance(fields, Mapping):
        raise SpeckDefinitionError(f"{label} fields must be a mapping of names to specks.")
    codecs: dict[str, Codec] = {}
    strategies: dict[str, st.SearchStrategy[Any]] = {}
    for key, value in fields.items():
        if not isinstance(key, str):
            raise SpeckDefinitionError(f"{label} field names must be strings, got {key!r}.")
        speck = require_speck(value, f"{label} field '{key}'")
        codecs[key] = speck.codec
        strategies[key] = speck.strategy
    return codecs, strategies


def _pair(specks: Sequence[AnySpeck], label: str) -> tuple[AnySpeck, AnySpeck]:
    if isinstance(specks, Mapping) or not isinstance(specks, Sequence) or len(specks) != 2:
        raise SpeckDefinitionError(f"{label} takes a list of exactly two specks.")
    return specks[0], specks[1]
