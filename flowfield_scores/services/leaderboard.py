"""Leaderboard operations: score submission and per-map top scores."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

import pydantic

from ..errors import ValidationError
from ..models import MapId, Score, ScoreRead, ScoreSubmission
from .store import ScoreStore

logger = logging.getLogger(__name__)

TOP_SCORES_LIMIT = 5


def decode_payload(raw: bytes) -> Any:
    """Decode a request body as JSON regardless of its declared content-type."""

    try:
        return json.loads(raw)
    except ValueError as exc:
        raise ValidationError(
            ["body"],
            [{"type": "json_invalid", "loc": ["body"], "msg": "Request body is not valid JSON"}],
        ) from exc


def parse_submission(payload: Any) -> ScoreSubmission:
    """Validate a decoded JSON payload against the score schema."""

    try:
        return ScoreSubmission.model_validate(payload)
    except pydantic.ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        fields = []
        for error in errors:
            field = ".".join(str(part) for part in error["loc"]) or "body"
            if field not in fields:
                fields.append(field)
        raise ValidationError(fields, errors) from exc


def score_to_dict(score: Score) -> Dict[str, Any]:
    return ScoreRead.model_validate(score, from_attributes=True).model_dump(mode="json")


def top_scores_to_dict(top: Dict[MapId, List[Score]]) -> Dict[str, List[Dict[str, Any]]]:
    """Serialise a top-scores mapping to API-friendly dict."""

    return {map_id.value: [score_to_dict(score) for score in scores] for map_id, scores in top.items()}


class LeaderboardService:
    """Validates submissions and assembles per-map rankings over a score store."""

    def __init__(self, store: ScoreStore):
        self.store = store

    def submit_raw(self, raw: bytes) -> None:
        """Decode a raw request body and submit it as a score."""

        try:
            payload = decode_payload(raw)
        except ValidationError as exc:
            logger.warning("Rejected score submission: %s", ", ".join(exc.fields))
            raise
        self.submit_score(payload)

    def submit_score(self, payload: Any) -> None:
        """Validate a decoded payload and append it to the store."""

        try:
            submission = parse_submission(payload)
        except ValidationError as exc:
            logger.warning("Rejected score submission: %s", ", ".join(exc.fields))
            raise

        score_id = self.store.insert(submission.to_record())
        logger.info(
            "Stored score %s for %r on %s (id=%s)",
            submission.score,
            submission.name,
            submission.map.value,
            score_id,
        )

    def fetch_top_scores(self) -> Dict[MapId, List[Score]]:
        """Top scores for every map, in map declaration order."""

        return {map_id: self.store.query_top_by_map(map_id, TOP_SCORES_LIMIT) for map_id in MapId}


__all__ = [
    "LeaderboardService",
    "TOP_SCORES_LIMIT",
    "decode_payload",
    "parse_submission",
    "score_to_dict",
    "top_scores_to_dict",
]
