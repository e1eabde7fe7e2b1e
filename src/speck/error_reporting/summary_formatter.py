"""One-line summaries of decode failures."""

from __future__ import annotations

import json
from collections.abc import Iterable

from speck.decoding import ABSENT, DecodeFailure


def summarize_failures(decode_failures: Iterable[DecodeFailure]) -> list[str]:
    """Return one summary line per failure, in failure order."""
    return [summarize_failure(item) for item in decode_failures]


def summarize_failure(item: DecodeFailure) -> str:
    """Format ``Expecting <type> at <path> but instead got: <value>``.

    The path is made of speck keys, so ``1.price`` can mean the ``price``
    field of the second member of an intersection.
    """
    if item.message is not None:
        return item.message
    expected = item.context[-1].codec.name if item.context else "unknown"
    path = failure_path(item)
    location = f" at {path}" if path else ""
    return f"Expecting {expected}{location} but instead got: {render_value(item.value)}"


def failure_path(item: DecodeFailure) -> str:
    return ".".join(entry.key for entry in item.context if entry.key)


def render_value(value: object) -> str:
    if value is ABSENT:
        return "undefined"
    try:
        return json.dumps(value, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError):
        return repr(value)
