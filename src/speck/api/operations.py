"""Validation and generation operations over finished specks."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from speck.configuration import SpeckSettings
from speck.decoding import ExactCodec
from speck.error_reporting import SpeckValidationErrors
from speck.generation import draw_samples
from speck.specks import ObjectSpeck, Speck

T = TypeVar("T")

_LOGGER = logging.getLogger(__name__)


def validate(
    speck: Speck[T],
    item: object,
    *,
    skip_strict: bool = False,
    settings: SpeckSettings | None = None,
) -> T | SpeckValidationErrors:
    """Decode item against speck.

    Returns the decoded (re-encoded) value, or a
    :class:`SpeckValidationErrors` report. Bad input never raises.

    Object specks are validated strictly by default: fields that the speck
    does not declare are stripped. Specks that allow unknown fields (e.g.
    anything intersected with ``unknown_record``) are never stripped.
    ``skip_strict=True`` keeps undeclared fields::

        >>> S = s.type_({"x": s.float_, "y": s.float_})
        >>> s.validate(S, {"x": 12, "y": 34, "z": 56}, skip_strict=True)
        {'x': 12, 'y': 34, 'z': 56}
        >>> s.validate(S, {"x": 12, "y": 34, "z": 56})
        {'x': 12, 'y': 34}

    Re-encoding a value of a speck that contains a union can raise
    :class:`~speck.decoding.SpeckEncodeError` when no union member claims
    the decoded value; pass ``skip_strict=True`` if that happens.
    """
    settings = settings if settings is not None else SpeckSettings()
    strict = isinstance(speck, ObjectSpeck) and not skip_strict and not speck.allows_unknown
    codec = ExactCodec(speck.codec) if strict else speck.codec
    _LOGGER.debug("Validating against %s (strict=%s)", speck.type_name, strict)

    result = codec.decode(item)
    if not result.is_ok:
        _LOGGER.debug(
            "Validation against %s failed: %d failure(s)", speck.type_name, len(result.failures)
        )
        return SpeckValidationErrors(
            result.failures, include_detail=settings.errors.include_detail
        )
    return speck.codec.encode(result.value)  # type: ignore[no-any-return]


def assert_(speck: Speck[T], item: object, *, settings: SpeckSettings | None = None) -> T:
    """Like :func:`validate`, but raises the report instead of returning it.

    Validation is never strict here, so this is meant for trusted data,
    vital assertions and quick experiments rather than external input.
    """
    result = validate(speck, item, skip_strict=True, settings=settings)
    if isinstance(result, SpeckValidationErrors):
        raise result
    return result


def gen(
    speck: Speck[T],
    overrides: Mapping[str, Any] | None = None,
    *,
    seed: int | None = None,
    settings: SpeckSettings | None = None,
) -> T:
    """Generate one value for speck.

    For object specks, overrides are merged over the sample::

        s.gen(C1Request, {
            "organization": s.gen(Organization, {"id": "..."}),
        })

    The merged value is not validated.
    """
    sample = gen_many(speck, 1, seed=seed, settings=settings)[0]
    if isinstance(speck, ObjectSpeck) and overrides is not None:
        return {**sample, **overrides}  # type: ignore[return-value]
    return sample


def gen_many(
    speck: Speck[T],
    count: int,
    *,
    seed: int | None = None,
    settings: SpeckSettings | None = None,
) -> list[T]:
    """Generate ``count`` values for speck."""
    settings = settings if settings is not None else SpeckSettings()
    if seed is None:
        seed = settings.generation.seed
    return draw_samples(
        speck.strategy,
        count,
        seed=seed,
        batch_size=settings.generation.sample_batch_size,
    )
