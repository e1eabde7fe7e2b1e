"""Error reporting exports."""

from .summary_formatter import failure_path, render_value, summarize_failure, summarize_failures
from .validation_errors import SpeckValidationErrors

__all__ = [
    "SpeckValidationErrors",
    "failure_path",
    "render_value",
    "summarize_failure",
    "summarize_failures",
]
