"""System-level API endpoints."""

from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter

from ...models import MapId

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/maps")
def list_maps() -> List[str]:
    """Map identifiers in leaderboard order."""

    return [map_id.value for map_id in MapId]


__all__ = ["router"]
