"""Validation and generation API exports."""

from .operations import assert_, gen, gen_many, validate

__all__ = [
    "assert_",
    "gen",
    "gen_many",
    "validate",
]
