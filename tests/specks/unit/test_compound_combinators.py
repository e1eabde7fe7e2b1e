"""Compound speck tests."""

from __future__ import annotations

import pytest
import speck as s
from speck.specks import NON_EMPTY_ARRAY_MAX_SIZE

Person = s.type_({"name": s.string})

SPACESHIP_FIELDS = {
    "type": s.literal("Spaceship"),
    "fuel": s.positive_float,
    "crew": s.array(Person),
    "name": s.string,
}


def test_array_validates_every_element() -> None:
    speck = s.array(s.int_)

    assert s.validate(speck, [1, 2, 3]) == [1, 2, 3]
    assert s.validate(speck, []) == []
    assert isinstance(s.validate(speck, [1, "2"]), s.SpeckValidationErrors)
    assert speck.is_object_kind is False


def test_non_empty_array_boundary() -> None:
    speck = s.non_empty_array(s.int_)

    assert isinstance(s.validate(speck, []), s.SpeckValidationErrors)
    assert s.validate(speck, [1]) == [1]
    for value in s.gen_many(speck, 50):
        assert 1 <= len(value) <= NON_EMPTY_ARRAY_MAX_SIZE


def test_record_requires_string_keys_speck() -> None:
    speck = s.record(s.string, s.float_)

    assert speck.is_object_kind is True
    assert s.validate(speck, {"a": 1.5, "b": 2}) == {"a": 1.5, "b": 2}
    assert isinstance(s.validate(speck, {"a": "x"}), s.SpeckValidationErrors)
    with pytest.raises(s.SpeckDefinitionError, match="keys must be a string speck"):
        s.record(s.int_, s.float_)


def test_type_requires_every_field() -> None:
    speck = s.type_({"a": s.string, "b": s.int_})

    assert s.validate(speck, {"a": "x", "b": 1}) == {"a": "x", "b": 1}
    result = s.validate(speck, {"a": "x"})
    assert isinstance(result, s.SpeckValidationErrors)
    assert result.summary == ["Expecting Int at b but instead got: undefined"]
    assert speck.allows_unknown is False


def test_type_generation_populates_every_field() -> None:
    speck = s.type_({"a": s.string, "b": s.int_})

    for value in s.gen_many(speck, 10):
        assert set(value) == {"a", "b"}


def test_partial_treats_none_and_absence_the_same() -> None:
    speck = s.partial({"a": s.string})

    assert s.validate(speck, {}) == {}
    assert s.validate(speck, {"a": None}) == {"a": None}
    assert s.validate(speck, {"a": "x"}) == {"a": "x"}
    assert isinstance(s.validate(speck, {"a": 5}), s.SpeckValidationErrors)


def test_partial_generation_can_omit_fields() -> None:
    speck = s.partial({"a": s.string, "b": s.int_})

    values = s.gen_many(speck, 60, seed=7)

    assert all(set(value) <= {"a", "b"} for value in values)
    assert any(len(value) < 2 for value in values)


def test_intersection_requires_object_specks() -> None:
    with pytest.raises(s.SpeckDefinitionError, match="object speck"):
        s.intersection([s.literal("x"), s.type_({"a": s.string})])  # type: ignore[list-item]


def test_intersection_validates_both_sides() -> None:
    speck = s.intersection([s.type_({"abc": s.string}), s.partial({"def": s.float_})])

    assert s.validate(speck, {"abc": "x"}) == {"abc": "x"}
    assert s.validate(speck, {"abc": "x", "def": 1.5}) == {"abc": "x", "def": 1.5}
    assert isinstance(s.validate(speck, {"def": 1.5}), s.SpeckValidationErrors)
    assert isinstance(s.validate(speck, {"abc": "x", "def": "y"}), s.SpeckValidationErrors)


def test_intersection_generation_merges_both_samples() -> None:
    speck = s.intersection([s.type_({"a": s.string}), s.type_({"b": s.int_})])

    for value in s.gen_many(speck, 10):
        assert set(value) == {"a", "b"}


def test_intersection_generation_lets_second_side_win_on_shared_keys() -> None:
    first = s.type_({"k": s.literal("first")})
    second = s.type_({"k": s.literal("second")})
    speck = s.intersection([first, second])

    assert s.gen(speck) == {"k": "second"}


def test_intersection_inherits_allows_unknown() -> None:
    closed = s.type_({"x": s.float_})

    assert s.intersection([closed, closed]).allows_unknown is False
    assert s.intersection([closed, s.unknown_record]).allows_unknown is True
    assert s.intersection([s.unknown_record, closed]).allows_unknown is True


def test_union_objects_stays_object_kind() -> None:
    speck = s.union_objects([s.type_({"a": s.string}), s.type_({"b": s.float_})])

    assert speck.is_object_kind is True
    assert s.validate(speck, {"b": 2.0}) == {"b": 2.0}
    assert isinstance(s.validate(speck, {"c": 1}), s.SpeckValidationErrors)
    intersected = s.intersection([speck, s.type_({"id": s.string})])
    assert s.validate(intersected, {"a": "x", "id": "1"}) == {"a": "x", "id": "1"}


def test_union_objects_rejects_scalar_specks() -> None:
    with pytest.raises(s.SpeckDefinitionError):
        s.union_objects([s.string, s.type_({"a": s.string})])  # type: ignore[list-item]


def test_union_downgrades_to_scalar_kind() -> None:
    speck = s.union([s.type_({"a": s.string}), s.type_({"b": s.float_})])

    assert speck.is_object_kind is False
    with pytest.raises(s.SpeckDefinitionError):
        s.intersection([speck, s.type_({"c": s.string})])  # type: ignore[list-item]


def test_union_accepts_either_member() -> None:
    speck = s.union([s.string, s.int_])

    assert s.validate(speck, 1) == 1
    assert s.validate(speck, "1") == "1"
    assert isinstance(s.validate(speck, True), s.SpeckValidationErrors)
    assert all(isinstance(value, (str, int)) for value in s.gen_many(speck, 20))


def test_combinators_take_exactly_two_specks() -> None:
    closed = s.type_({"a": s.string})

    with pytest.raises(s.SpeckDefinitionError, match="exactly two"):
        s.intersection([closed])
    with pytest.raises(s.SpeckDefinitionError, match="exactly two"):
        s.union([s.string, s.int_, s.boolean])


def test_field_mappings_must_hold_specks() -> None:
    with pytest.raises(s.SpeckDefinitionError, match="field 'a'"):
        s.type_({"a": str})  # type: ignore[dict-item]
    with pytest.raises(s.SpeckDefinitionError, match="field names must be strings"):
        s.partial({1: s.string})  # type: ignore[dict-item]


def test_pick_requireds_accepts_required_subset() -> None:
    speck = s.pick_requireds(SPACESHIP_FIELDS, ["type", "fuel"])

    value = {"type": "Spaceship", "fuel": 12.5}
    assert s.validate(speck, value) == value


def test_pick_requireds_rejects_missing_required_field() -> None:
    speck = s.pick_requireds(SPACESHIP_FIELDS, ["type", "fuel"])

    assert isinstance(s.validate(speck, {"type": "Spaceship"}), s.SpeckValidationErrors)


def test_pick_requireds_validates_optional_fields_when_present() -> None:
    speck = s.pick_requireds(SPACESHIP_FIELDS, ["type", "fuel"])

    result = s.validate(speck, {"type": "Spaceship", "fuel": 1, "crew": "nobody"})

    assert isinstance(result, s.SpeckValidationErrors)
    crew = [{"name": "Ripley"}]
    assert s.validate(speck, {"type": "Spaceship", "fuel": 1, "crew": crew}) == {
        "type": "Spaceship",
        "fuel": 1,
        "crew": crew,
    }


def test_pick_requireds_rejects_unknown_names() -> None:
    with pytest.raises(s.SpeckDefinitionError, match="captain"):
        s.pick_requireds(SPACESHIP_FIELDS, ["type", "captain"])
