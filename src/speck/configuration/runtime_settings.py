"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from speck.generation import DEFAULT_SAMPLE_BATCH_SIZE


@dataclass(frozen=True)
class ErrorReportSettings:
    """How much detail validation reports carry."""

    include_detail: bool = True


@dataclass(frozen=True)
class GenerationSettings:
    """Sample drawing configuration."""

    sample_batch_size: int = DEFAULT_SAMPLE_BATCH_SIZE
    seed: int | None = None


@dataclass(frozen=True)
class SpeckSettings:
    """Top-level configuration aggregate."""

    errors: ErrorReportSettings = field(default_factory=ErrorReportSettings)
    generation: GenerationSettings = field(default_factory=GenerationSettings)
