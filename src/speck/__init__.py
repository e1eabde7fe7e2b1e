"""Speck: one declaration for a type, its validator and its test data generator.

```python
import speck as s

Url = s.type_({"type": s.literal("Url"), "id": s.url_string})
s.validate(Url, {"type": "Url", "id": "https://example.org"})
s.gen(Url)
```
"""

import logging

from .api import assert_, gen, gen_many, validate
from .configuration import (
    ConfigurationError,
    ErrorReportSettings,
    GenerationSettings,
    SpeckSettings,
    load_configuration,
    settings_from_environment,
)
from .decoding import SpeckEncodeError
from .error_reporting import SpeckValidationErrors
from .specks import (
    AnySpeck,
    ObjectSpeck,
    ScalarSpeck,
    Speck,
    SpeckDefinitionError,
    array,
    big_int,
    boolean,
    date_time,
    email_string,
    float_,
    int_,
    intersection,
    is_speck,
    iso_date_time_string,
    literal,
    literal_number_enum,
    literal_string_enum,
    make_object_speck,
    make_scalar_speck,
    nil,
    non_empty_array,
    non_negative_float,
    non_negative_int,
    partial,
    pick_requireds,
    positive_float,
    positive_int,
    record,
    string,
    type_,
    union,
    union_objects,
    unknown,
    unknown_record,
    url_string,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "assert_",
    "gen",
    "gen_many",
    "validate",
    "ConfigurationError",
    "ErrorReportSettings",
    "GenerationSettings",
    "SpeckSettings",
    "load_configuration",
    "settings_from_environment",
    "SpeckEncodeError",
    "SpeckValidationErrors",
    "AnySpeck",
    "ObjectSpeck",
    "ScalarSpeck",
    "Speck",
    "SpeckDefinitionError",
    "array",
    "big_int",
    "boolean",
    "date_time",
    "email_string",
    "float_",
    "int_",
    "intersection",
    "is_speck",
    "iso_date_time_string",
    "literal",
    "literal_number_enum",
    "literal_string_enum",
    "make_object_speck",
    "make_scalar_speck",
    "nil",
    "non_empty_array",
    "non_negative_float",
    "non_negative_int",
    "partial",
    "pick_requireds",
    "positive_float",
    "positive_int",
    "record",
    "string",
    "type_",
    "union",
    "union_objects",
    "unknown",
    "unknown_record",
    "url_string",
]
