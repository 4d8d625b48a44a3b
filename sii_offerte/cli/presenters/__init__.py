"""Presenters for CLI output formatting.

Presenters turn results of the application layer into rich tables and
status lines on the console.
"""

from .export import ExportPresenter
from .validation import ValidationPresenter

__all__ = ["ExportPresenter", "ValidationPresenter"]
