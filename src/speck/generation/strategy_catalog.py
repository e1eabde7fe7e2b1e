"""Hypothesis strategies backing the primitive specks."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from hypothesis import strategies as st

ISO_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_ISO_DATETIME_MIN = datetime(2020, 1, 1)
_ISO_DATETIME_MAX = datetime(2030, 1, 1) - timedelta(seconds=1)


def iso_date_time_strings() -> st.SearchStrategy[str]:
    """UTC datetimes in [2020-01-01, 2030-01-01) rendered with seconds precision."""
    return st.datetimes(
        min_value=_ISO_DATETIME_MIN,
        max_value=_ISO_DATETIME_MAX,
        timezones=st.just(timezone.utc),
    ).map(lambda value: value.strftime(ISO_DATETIME_FORMAT))


def unknown_values() -> st.SearchStrategy[Any]:
    """JSON-like values of any shape. NaN is excluded so values compare equal."""
    scalars = (
        st.none()
        | st.booleans()
        | st.integers()
        | st.floats(allow_nan=False)
        | st.text()
    )
    return st.recursive(
        scalars,
        lambda children: st.lists(children, max_size=4)
        | st.dictionaries(st.text(), children, max_size=4),
        max_leaves=8,
    )


def unknown_records() -> st.SearchStrategy[dict[str, Any]]:
    return st.dictionaries(st.text(), unknown_values(), max_size=5)


def nil_values() -> st.SearchStrategy[None]:
    return st.none()
