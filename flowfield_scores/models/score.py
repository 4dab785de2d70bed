"""Score record model and request/response schemas."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from sqlalchemy import Index
from sqlmodel import Field as ORMField, SQLModel


class MapId(str, Enum):
    """Maps that keep their own leaderboard, in display order."""

    DUAL_VISION = "dual vision"
    CLOCKBACK = "clockback"
    CURL_VALLEY = "curl valley"


class ScoreBase(SQLModel):
    name: str = ORMField(max_length=2)
    score: float
    map: MapId


class Score(ScoreBase, table=True):
    """A submitted result. Rows are only ever inserted."""

    __table_args__ = (Index("by_map_score", "map", "score"),)

    id: Optional[int] = ORMField(default=None, primary_key=True)


class ScoreRead(ScoreBase):
    """Public representation of a score."""


class ScoreSubmission(BaseModel):
    """Incoming ``POST /newScore`` payload."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(strict=True, max_length=2)
    score: float = Field(strict=True, allow_inf_nan=False)
    map: MapId

    @field_validator("name")
    @classmethod
    def _name_fits_two_utf16_units(cls, value: str) -> str:
        # Length in UTF-16 code units.
        if len(value.encode("utf-16-le")) // 2 > 2:
            raise ValueError("name must be at most 2 UTF-16 code units")
        return value

    def to_record(self) -> Score:
        return Score(name=self.name, score=self.score, map=self.map)


__all__ = ["MapId", "Score", "ScoreBase", "ScoreRead", "ScoreSubmission"]
