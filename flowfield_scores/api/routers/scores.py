"""Score submission and leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool
from sqlmodel import Session

from ...core import get_session
from ...services import LeaderboardService, ScoreStore, top_scores_to_dict

router = APIRouter(tags=["scores"])


def get_leaderboard(session: Session = Depends(get_session)) -> LeaderboardService:
    """FastAPI dependency that builds a leaderboard over the request session."""

    return LeaderboardService(ScoreStore(session))


@router.post("/newScore")
async def new_score(
    request: Request,
    leaderboard: LeaderboardService = Depends(get_leaderboard),
) -> Response:
    """Record a player's score on a map."""

    # Decoded as JSON whatever the content-type header says.
    raw = await request.body()
    await run_in_threadpool(leaderboard.submit_raw, raw)
    return Response(status_code=200)


@router.get("/topScores")
def top_scores(
    leaderboard: LeaderboardService = Depends(get_leaderboard),
) -> Dict[str, List[Dict[str, Any]]]:
    """Top five scores for every map."""

    return top_scores_to_dict(leaderboard.fetch_top_scores())


__all__ = ["get_leaderboard", "router"]
