# mediarating/api/ratings.py

from fastapi import APIRouter, Depends, Path, Response, status
from mediarating.core.dependencies import get_current_user_id, get_rating_service
from mediarating.schemas.rating import Rating, RatingRequest
from mediarating.services.rating_service import RatingService

router = APIRouter()


@router.get("/{rating_id}", response_model=Rating, summary="Rating detail")
def get_rating(
    rating_id: int = Path(description="Rating ID"),
    current_user_id: int = Depends(get_current_user_id),
    rating_service: RatingService = Depends(get_rating_service),
):
    return rating_service.get_rating(rating_id)


@router.put(
    "/{rating_id}",
    response_model=Rating,
    summary="Edit rating",
    description="Only the author may edit. The comment is replaced; leaving it out clears it.",
)
def update_rating(
    rating_data: RatingRequest,
    rating_id: int = Path(description="Rating ID"),
    current_user_id: int = Depends(get_current_user_id),
    rating_service: RatingService = Depends(get_rating_service),
):
    return rating_service.update_rating(rating_id, current_user_id, rating_data.stars, rating_data.comment)


@router.post(
    "/{rating_id}/like",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Like / unlike",
    description="Toggles the caller's like on the rating.",
)
def like_rating(
    rating_id: int = Path(description="Rating ID"),
    current_user_id: int = Depends(get_current_user_id),
    rating_service: RatingService = Depends(get_rating_service),
):
    rating_service.toggle_like(rating_id, current_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{rating_id}/confirm",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Confirm rating",
    description="Only the author may confirm.",
)
def confirm_rating(
    rating_id: int = Path(description="Rating ID"),
    current_user_id: int = Depends(get_current_user_id),
    rating_service: RatingService = Depends(get_rating_service),
):
    rating_service.confirm_rating(rating_id, current_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
