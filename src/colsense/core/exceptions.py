"""ColSense exception hierarchy.

Scoring itself never raises: a malformed dictionary entry is a developer
mistake surfaced by ``assert`` in :mod:`colsense.scoring.validator`, not one
of these errors.
"""

from __future__ import annotations


class ColSenseError(Exception):
    """Base exception for all ColSense errors."""


class UnknownColumnKindError(ColSenseError):
    """No column kind is registered under the requested label."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Unknown column kind: {label!r}")


class ConfigurationError(ColSenseError):
    """A runtime parameter is outside its accepted range."""
