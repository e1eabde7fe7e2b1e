"""Validation failure report."""

from __future__ import annotations

from collections.abc import Sequence

from speck.decoding import DecodeFailure

from .summary_formatter import summarize_failures


class SpeckValidationErrors(Exception):
    """Report for one failed validation.

    ``summary`` holds one brief line per failure, e.g.::

        ['Expecting number at 1.price but instead got: "not a number"']

    The path (``1.price``) is a path through the speck, not through the
    data, so ``1`` may be the second member of an intersection.

    ``errors`` holds every :class:`DecodeFailure` including the codecs on
    its path. It is handy in a debugger but far too large to print, and is
    ``None`` when the report was built with ``include_detail=False``.
    """

    summary: list[str]
    errors: tuple[DecodeFailure, ...] | None

    def __init__(
        self, decode_failures: Sequence[DecodeFailure], *, include_detail: bool = True
    ) -> None:
        super().__init__("Validation Error")
        self.summary = summarize_failures(decode_failures)
        self.errors = tuple(decode_failures) if include_detail else None

    def describe(self) -> str:
        """Return the summary lines as one newline separated string."""
        return "\n".join(self.summary)
