"""Service layer helpers."""

from .leaderboard import (
    TOP_SCORES_LIMIT,
    LeaderboardService,
    decode_payload,
    parse_submission,
    score_to_dict,
    top_scores_to_dict,
)
from .store import ScoreStore

__all__ = [
    "LeaderboardService",
    "ScoreStore",
    "TOP_SCORES_LIMIT",
    "decode_payload",
    "parse_submission",
    "score_to_dict",
    "top_scores_to_dict",
]
