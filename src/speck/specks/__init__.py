"""Speck construction exports."""

from .compound_combinators import (
    NON_EMPTY_ARRAY_MAX_SIZE,
    NON_EMPTY_ARRAY_MIN_SIZE,
    array,
    intersection,
    non_empty_array,
    partial,
    pick_requireds,
    record,
    type_,
    union,
    union_objects,
)
from .primitive_catalog import (
    big_int,
    boolean,
    date_time,
    email_string,
    float_,
    int_,
    iso_date_time_string,
    literal,
    literal_number_enum,
    literal_string_enum,
    nil,
    non_negative_float,
    non_negative_int,
    positive_float,
    positive_int,
    string,
    unknown,
    unknown_record,
    url_string,
)
from .speck_models import (
    AnySpeck,
    ObjectSpeck,
    ScalarSpeck,
    Speck,
    SpeckDefinitionError,
    is_speck,
    make_object_speck,
    make_scalar_speck,
)

__all__ = [
    "NON_EMPTY_ARRAY_MAX_SIZE",
    "NON_EMPTY_ARRAY_MIN_SIZE",
    "array",
    "intersection",
    "non_empty_array",
    "partial",
    "pick_requireds",
    "record",
    "type_",
    "union",
    "union_objects",
    "big_int",
    "boolean",
    "date_time",
    "email_string",
    "float_",
    "int_",
    "iso_date_time_string",
    "literal",
    "literal_number_enum",
    "literal_string_enum",
    "nil",
    "non_negative_float",
    "non_negative_int",
    "positive_float",
    "positive_int",
    "string",
    "unknown",
    "unknown_record",
    "url_string",
    "AnySpeck",
    "ObjectSpeck",
    "ScalarSpeck",
    "Speck",
    "SpeckDefinitionError",
    "is_speck",
    "make_object_speck",
    "make_scalar_speck",
]
