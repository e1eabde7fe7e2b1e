"""Configuration loader service."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from speck.generation import DEFAULT_SAMPLE_BATCH_SIZE

from .runtime_settings import ErrorReportSettings, GenerationSettings, SpeckSettings

ERROR_EXCLUDE_DETAIL_ENV = "SPECK_ERROR_EXCLUDE_DETAIL"
GENERATION_SEED_ENV = "SPECK_GENERATION_SEED"

_LOGGER = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when the configuration file or environment is invalid."""


def load_configuration(config_path: Path | str) -> SpeckSettings:
    """Load and validate a YAML/JSON settings file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    settings = SpeckSettings(
        errors=_parse_errors_section(parsed.get("errors")),
        generation=_parse_generation_section(parsed.get("generation")),
    )
    _LOGGER.debug("Loaded speck settings from %s: %r", path, settings)
    return settings


def settings_from_environment(
    environ: Mapping[str, str] | None = None, base: SpeckSettings | None = None
) -> SpeckSettings:
    """Apply ``SPECK_*`` environment variables on top of base settings."""
    environ = environ if environ is not None else os.environ
    settings = base if base is not None else SpeckSettings()

    exclude_detail = environ.get(ERROR_EXCLUDE_DETAIL_ENV)
    if exclude_detail is not None:
        settings = replace(
            settings,
            errors=replace(settings.errors, include_detail=exclude_detail.strip() != "true"),
        )

    seed_text = environ.get(GENERATION_SEED_ENV)
    if seed_text is not None and seed_text.strip():
        try:
            seed = int(seed_text.strip())
        except ValueError as exc:
            raise ConfigurationError(f"{GENERATION_SEED_ENV} must be an integer.") from exc
        settings = replace(settings, generation=replace(settings.generation, seed=seed))

    return settings


def _parse_errors_section(value: Any) -> ErrorReportSettings:
    section = _optional_mapping(value, "errors")
    include_detail = _optional_bool(section.get("include_detail", True), "errors.include_detail")
    return ErrorReportSettings(include_detail=include_detail)


def _parse_generation_section(value: Any) -> GenerationSettings:
    section = _optional_mapping(value, "generation")
    sample_batch_size = _require_positive_int(
        section.get("sample_batch_size", DEFAULT_SAMPLE_BATCH_SIZE),
        "generation.sample_batch_size",
    )
    seed = section.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ConfigurationError("generation.seed must be an integer.")
    return GenerationSettings(sample_batch_size=sample_batch_size, seed=seed)


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
