"""Append-only persistence of score records."""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, func, select

from ..errors import StorageError
from ..models import MapId, Score

logger = logging.getLogger(__name__)


class ScoreStore:
    """Score table access bound to a single session.

    Ranking reads go through the ``by_map_score`` index: one range scan per
    map, with equal scores ordered by ``id`` so earlier submissions win.
    """

    def __init__(self, session: Session):
        self._session = session

    def insert(self, record: Score) -> int:
        """Append a record and return its database id."""

        try:
            self._session.add(record)
            self._session.commit()
            self._session.refresh(record)
        except SQLAlchemyError as exc:
            self._session.rollback()
            logger.exception("Failed to insert score for map %s", record.map)
            raise StorageError("Could not store score") from exc
        return record.id

    def query_top_by_map(self, map_id: MapId, limit: int) -> List[Score]:
        """Highest scores on one map, best first, at most ``limit`` rows."""

        if limit <= 0:
            raise ValueError("limit must be positive")

        statement = (
            select(Score)
            .where(Score.map == map_id)
            .order_by(Score.score.desc(), Score.id.asc())
            .limit(limit)
        )
        try:
            return list(self._session.exec(statement).all())
        except SQLAlchemyError as exc:
            logger.exception("Failed to read top scores for map %s", map_id.value)
            raise StorageError("Could not read scores") from exc

    def count(self, map_id: Optional[MapId] = None) -> int:
        """Number of stored records, optionally for a single map."""

        statement = select(func.count()).select_from(Score)
        if map_id is not None:
            statement = statement.where(Score.map == map_id)
        try:
            return int(self._session.exec(statement).one())
        except SQLAlchemyError as exc:
            logger.exception("Failed to count scores")
            raise StorageError("Could not count scores") from exc


__all__ = ["ScoreStore"]
