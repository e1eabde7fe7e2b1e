"""Drawing concrete samples from hypothesis strategies outside of tests."""

from __future__ import annotations

import copy
import logging
import random
import threading
import weakref
from collections.abc import Hashable
from typing import Any, TypeVar

import hypothesis
from hypothesis import HealthCheck, Phase, Verbosity, given, settings
from hypothesis import strategies as st
from hypothesis.control import current_build_context, currently_in_test_context

T = TypeVar("T")

DEFAULT_SAMPLE_BATCH_SIZE = 10

_LOGGER = logging.getLogger(__name__)

_POOLS: weakref.WeakKeyDictionary[st.SearchStrategy[Any], list[Any]] = (
    weakref.WeakKeyDictionary()
)
_POOLS_LOCK = threading.Lock()


class SampleDrawError(Exception):
    """Raised when a strategy yields no sample at all."""


def draw_samples(
    strategy: st.SearchStrategy[T],
    count: int,
    *,
    seed: Hashable | None = None,
    batch_size: int = DEFAULT_SAMPLE_BATCH_SIZE,
) -> list[T]:
    """Draw ``count`` values from strategy.

    With a seed, the same strategy and seed always give the same values.
    Without one, values come from a per-strategy pool that is refilled
    with ``batch_size`` fresh values whenever it runs dry.

    Inside a running hypothesis test the values are drawn from that test's
    data instead, so they follow its seed and shrink with it; ``seed`` is
    ignored there.
    """
    if count < 0:
        raise ValueError("count must not be negative.")
    if currently_in_test_context():
        data = current_build_context().data
        return [data.draw(strategy) for _ in range(count)]
    if seed is not None:
        return _seeded_batch(strategy, count, seed=seed, batch_size=batch_size)
    drawn: list[T] = []
    while len(drawn) < count:
        drawn.append(_pop_pooled(strategy, batch_size))
    return drawn


def draw_sample(
    strategy: st.SearchStrategy[T],
    *,
    seed: Hashable | None = None,
    batch_size: int = DEFAULT_SAMPLE_BATCH_SIZE,
) -> T:
    """Draw exactly one value from strategy."""
    return draw_samples(strategy, 1, seed=seed, batch_size=batch_size)[0]


def _pop_pooled(strategy: st.SearchStrategy[T], batch_size: int) -> T:
    with _POOLS_LOCK:
        pool = _POOLS.get(strategy)
        if pool:
            return pool.pop()
    batch = _run_batch(strategy, batch_size, seed=None)
    random.shuffle(batch)
    value = batch.pop()
    with _POOLS_LOCK:
        _POOLS.setdefault(strategy, []).extend(batch)
    return value


def _seeded_batch(
    strategy: st.SearchStrategy[T], count: int, *, seed: Hashable, batch_size: int
) -> list[T]:
    batch = _run_batch(strategy, max(count, batch_size), seed=seed)
    random.Random(repr(seed)).shuffle(batch)
    return _cycle_to(batch, count)


def _run_batch(strategy: st.SearchStrategy[T], size: int, *, seed: Hashable | None) -> list[T]:
    collected: list[T] = []

    @given(strategy)
    @settings(
        database=None,
        max_examples=size,
        deadline=None,
        verbosity=Verbosity.quiet,
        phases=(Phase.generate,),
        suppress_health_check=list(HealthCheck),
    )
    def collect_generated_sample(value: T) -> None:
        collected.append(value)

    if seed is not None:
        collect_generated_sample = hypothesis.seed(seed)(collect_generated_sample)
    collect_generated_sample()
    _LOGGER.debug("Drew a batch of %d samples (seed=%r).", len(collected), seed)
    if not collected:
        raise SampleDrawError(f"Strategy produced no samples: {strategy!r}")
    return collected


def _cycle_to(values: list[T], count: int) -> list[T]:
    # Small search spaces (e.g. a constant) can be exhausted before max_examples.
    # Repeats are copies so that no two returned values share state.
    return [
        values[index] if index < len(values) else copy.deepcopy(values[index % len(values)])
        for index in range(count)
    ]
