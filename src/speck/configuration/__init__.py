"""Configuration domain exports."""

from .loader import (
    ERROR_EXCLUDE_DETAIL_ENV,
    GENERATION_SEED_ENV,
    ConfigurationError,
    load_configuration,
    settings_from_environment,
)
from .runtime_settings import ErrorReportSettings, GenerationSettings, SpeckSettings

__all__ = [
    "ErrorReportSettings",
    "GenerationSettings",
    "SpeckSettings",
    "ConfigurationError",
    "load_configuration",
    "settings_from_environment",
    "ERROR_EXCLUDE_DETAIL_ENV",
    "GENERATION_SEED_ENV",
]
