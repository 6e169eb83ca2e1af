"""Error taxonomy for snapshot parsing and stats derivation."""

from __future__ import annotations

import enum


class WrappedError(Exception):
    """Base error for GitHub Wrapped failures."""


class MalformedSnapshot(WrappedError, ValueError):
    """A required snapshot field is absent or has the wrong shape."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed snapshot at '{path}': {reason}")


class DegenerateAggregation(str, enum.Enum):
    """Legitimate empty-data states recorded on derived stats, never raised."""

    NO_LANGUAGE_DATA = "NO_LANGUAGE_DATA"
    NO_CONTRIBUTION_DAYS = "NO_CONTRIBUTION_DAYS"
