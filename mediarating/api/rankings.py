# mediarating/api/rankings.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from mediarating.core.dependencies import get_current_user_id, get_media_service
from mediarating.schemas.media import RankedMedia
from mediarating.services.media_service import MediaService

router = APIRouter()


@router.get(
    "/leaderboard",
    response_model=List[RankedMedia],
    summary="Leaderboard",
    description="Media ordered by average stars, then by number of ratings.",
)
def get_leaderboard(
    limit: Optional[int] = Query(default=None, description="Number of entries (1 ~ 100, default 10)"),
    current_user_id: int = Depends(get_current_user_id),
    media_service: MediaService = Depends(get_media_service),
):
    return media_service.get_leaderboard(limit)


@router.get(
    "/recommendations",
    response_model=List[RankedMedia],
    summary="Recommendations",
    description="Media the caller has not rated yet. type=content (default) or genre.",
)
def get_recommendations(
    rec_type: Optional[str] = Query(default=None, alias="type", description="content or genre"),
    limit: Optional[int] = Query(default=None, description="Number of entries (1 ~ 100, default 10)"),
    current_user_id: int = Depends(get_current_user_id),
    media_service: MediaService = Depends(get_media_service),
):
    return media_service.get_recommendations(current_user_id, limit, rec_type)
