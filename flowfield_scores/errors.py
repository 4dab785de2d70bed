"""Error types raised by the leaderboard core."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence


class LeaderboardError(Exception):
    """Base class for leaderboard failures."""


class ValidationError(LeaderboardError):
    """A submission does not match the score schema."""

    def __init__(self, fields: Sequence[str], errors: Sequence[Dict[str, Any]] = ()):
        self.fields: List[str] = list(fields)
        self.errors: List[Dict[str, Any]] = list(errors)
        super().__init__(f"Invalid score submission: {', '.join(self.fields) or 'payload'}")


class StorageError(LeaderboardError):
    """The score store could not read or write."""


__all__ = ["LeaderboardError", "StorageError", "ValidationError"]
