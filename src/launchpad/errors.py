"""Structured errors for the launcher list models."""

from __future__ import annotations
from typing import Any


class LaunchpadError(Exception):
    """Base class for launcher model issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class InvalidAppItemError(LaunchpadError, ValueError):
    """Raised when an item violates its invariants (e.g. empty display name)."""


class InvalidSearchPatternError(LaunchpadError, ValueError):
    """Raised when a regular expression search pattern cannot be compiled."""


class UnknownCategoryTypeError(LaunchpadError, ValueError):
    """Raised when a category type has no associated sort role."""
