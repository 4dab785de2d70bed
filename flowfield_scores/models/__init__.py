"""Database model exports."""

from .score import MapId, Score, ScoreRead, ScoreSubmission

__all__ = [
    "MapId",
    "Score",
    "ScoreRead",
    "ScoreSubmission",
]
