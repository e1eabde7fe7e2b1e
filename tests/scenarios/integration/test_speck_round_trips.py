"""End-to-end scenarios: generated values validate back to themselves."""

from __future__ import annotations

import pytest
import speck as s

Person = s.type_({"name": s.string, "email": s.email_string, "born": s.iso_date_time_string})

SPACESHIP_FIELDS = {
    "type": s.literal("Spaceship"),
    "fuel": s.non_negative_float,
    "crew": s.array(Person),
    "name": s.string,
}

Spaceship = s.pick_requireds(SPACESHIP_FIELDS, ["type", "fuel"])

Listing = s.intersection(
    [
        s.type_({"id": s.url_string, "kind": s.literal_string_enum(["sale", "rent"])}),
        s.partial({"price": s.float_, "tags": s.non_empty_array(s.string)}),
    ]
)

ROUND_TRIP_SPECKS = [
    pytest.param(s.string, id="string"),
    pytest.param(s.url_string, id="url_string"),
    pytest.param(s.email_string, id="email_string"),
    pytest.param(s.iso_date_time_string, id="iso_date_time_string"),
    pytest.param(s.float_, id="float"),
    pytest.param(s.int_, id="int"),
    pytest.param(s.boolean, id="boolean"),
    pytest.param(s.date_time, id="date_time"),
    pytest.param(s.big_int, id="big_int"),
    pytest.param(s.nil, id="nil"),
    pytest.param(s.unknown, id="unknown"),
    pytest.param(s.unknown_record, id="unknown_record"),
    pytest.param(s.literal_number_enum([1, 2, 3]), id="literal_number_enum"),
    pytest.param(s.array(s.int_), id="array"),
    pytest.param(s.non_empty_array(Person), id="non_empty_array"),
    pytest.param(s.record(s.string, s.boolean), id="record"),
    pytest.param(Person, id="type"),
    pytest.param(s.partial({"a": s.string, "b": s.nil}), id="partial"),
    pytest.param(Spaceship, id="pick_requireds"),
    pytest.param(Listing, id="intersection"),
    pytest.param(s.union_objects([Person, s.type_({"id": s.int_})]), id="union_objects"),
    pytest.param(s.union([s.string, Person]), id="union"),
    pytest.param(s.intersection([Person, s.unknown_record]), id="open_intersection"),
]


@pytest.mark.parametrize("speck", ROUND_TRIP_SPECKS)
def test_generated_values_validate_to_themselves(speck: s.AnySpeck) -> None:
    for value in s.gen_many(speck, 15, seed=2024):
        assert s.validate(speck, value) == value


def test_spaceship_overrides_compose_nested_generation() -> None:
    captain = s.gen(Person, {"name": "Ripley"})
    ship = s.gen(Spaceship, {"crew": [captain], "type": "Spaceship"})

    validated = s.validate(Spaceship, ship)

    assert not isinstance(validated, s.SpeckValidationErrors)
    assert validated["crew"][0]["name"] == "Ripley"


def test_strict_validation_of_extended_listing() -> None:
    listing = s.gen(Listing, seed=3)
    incoming = {**listing, "internal_note": "strip me"}

    assert s.validate(Listing, incoming) == listing
    assert s.validate(Listing, incoming, skip_strict=True) == incoming
