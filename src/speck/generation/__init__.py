"""Sample generation exports."""

from .sample_drawing import (
    DEFAULT_SAMPLE_BATCH_SIZE,
    SampleDrawError,
    draw_sample,
    draw_samples,
)
from .strategy_catalog import (
    ISO_DATETIME_FORMAT,
    iso_date_time_strings,
    nil_values,
    unknown_records,
    unknown_values,
)

__all__ = [
    "DEFAULT_SAMPLE_BATCH_SIZE",
    "SampleDrawError",
    "draw_sample",
    "draw_samples",
    "ISO_DATETIME_FORMAT",
    "iso_date_time_strings",
    "nil_values",
    "unknown_records",
    "unknown_values",
]
