# mediarating/api/media.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Path, Query, Response, status
from mediarating.core.dependencies import (
    get_comment_service,
    get_current_user_id,
    get_favorite_service,
    get_media_service,
    get_rating_service,
)
from mediarating.schemas.comment import Comment, CommentCreate
from mediarating.schemas.media import (
    AverageRating,
    MediaCreate,
    MediaEntry,
    MediaSearch,
    MediaUpdate,
)
from mediarating.schemas.rating import RatingRequest, RatingResult
from mediarating.services.comment_service import CommentService
from mediarating.services.favorite_service import FavoriteService
from mediarating.services.media_service import MediaService
from mediarating.services.rating_service import RatingService

router = APIRouter()


def get_media_search(
    title: Optional[str] = Query(default=None, description="Title contains (case-insensitive)"),
    rating: Optional[int] = Query(default=None, description="Creator supplied rating"),
    user_id: Optional[int] = Query(default=None, alias="userId", description="Owner user ID"),
    genre: Optional[str] = Query(default=None, description="Genre"),
    media_type: Optional[str] = Query(default=None, alias="mediaType", description="movie, series or game"),
    type_: Optional[str] = Query(default=None, alias="type", description="Same as mediaType"),
    release_year: Optional[int] = Query(default=None, alias="releaseYear", description="Release year"),
    age_restriction: Optional[int] = Query(default=None, alias="ageRestriction", description="Age restriction"),
    sort_by: Optional[str] = Query(default=None, alias="sortBy", description="title, rating, score, id or userId"),
) -> MediaSearch:
    return MediaSearch(
        title=title,
        rating=rating,
        user_id=user_id,
        genre=genre,
        media_type=media_type or type_,
        release_year=release_year,
        age_restriction=age_restriction,
        sort_by=sort_by,
    )


@router.get(
    "",
    response_model=List[MediaEntry],
    summary="Search media",
    description="Lists media entries; every filter is optional and they combine with AND.",
)
def list_media(
    filters: MediaSearch = Depends(get_media_search),
    media_service: MediaService = Depends(get_media_service),
):
    return media_service.list_media(filters)


@router.post(
    "",
    response_model=MediaEntry,
    status_code=status.HTTP_201_CREATED,
    summary="Create media",
)
def create_media(
    media_data: MediaCreate,
    current_user_id: int = Depends(get_current_user_id),
    media_service: MediaService = Depends(get_media_service),
):
    return media_service.create_media(media_data, current_user_id)


@router.get("/{media_id}", response_model=MediaEntry, summary="Media detail")
def get_media(
    media_id: int = Path(description="Media entry ID"),
    media_service: MediaService = Depends(get_media_service),
):
    return media_service.get_media(media_id)


@router.put(
    "/{media_id}",
    response_model=MediaEntry,
    summary="Update media",
    description="Only the creator may edit. Fields left out keep their value.",
)
def update_media(
    media_data: MediaUpdate,
    media_id: int = Path(description="Media entry ID"),
    current_user_id: int = Depends(get_current_user_id),
    media_service: MediaService = Depends(get_media_service),
):
    return media_service.update_media(media_id, media_data, current_user_id)


@router.delete(
    "/{media_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete media",
    description="Only the creator may delete. Ratings, comments and favorites go with it.",
)
def delete_media(
    media_id: int = Path(description="Media entry ID"),
    current_user_id: int = Depends(get_current_user_id),
    media_service: MediaService = Depends(get_media_service),
):
    media_service.delete_media(media_id, current_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ratings


@router.post(
    "/{media_id}/rate",
    response_model=RatingResult,
    summary="Rate media",
    description="1 ~ 5 stars. Rating again overwrites the stars; the old comment stays unless a new one is sent.",
)
def rate_media(
    rating_data: RatingRequest,
    media_id: int = Path(description="Media entry ID"),
    current_user_id: int = Depends(get_current_user_id),
    rating_service: RatingService = Depends(get_rating_service),
):
    return rating_service.set_rating(current_user_id, media_id, rating_data.stars, rating_data.comment)


@router.get(
    "/{media_id}/average-rating",
    response_model=AverageRating,
    summary="Average stars",
)
def get_average_rating(
    media_id: int = Path(description="Media entry ID"),
    rating_service: RatingService = Depends(get_rating_service),
):
    return rating_service.average_rating(media_id)


# comments


@router.get(
    "/{media_id}/comments",
    response_model=List[Comment],
    summary="Approved comments",
    description="Comments are listed only after approval, newest first.",
)
def get_media_comments(
    media_id: int = Path(description="Media entry ID"),
    comment_service: CommentService = Depends(get_comment_service),
):
    return comment_service.get_approved_comments(media_id)


@router.post(
    "/{media_id}/comments",
    response_model=Comment,
    status_code=status.HTTP_201_CREATED,
    summary="Write a comment",
    description="New comments wait for approval by the owner of the media entry.",
)
def create_comment(
    comment_data: CommentCreate,
    media_id: int = Path(description="Media entry ID"),
    current_user_id: int = Depends(get_current_user_id),
    comment_service: CommentService = Depends(get_comment_service),
):
    return comment_service.create_comment(media_id, comment_data, current_user_id)


# favorites


@router.post(
    "/{media_id}/favorite",
    summary="Mark as favorite",
    description="204 when added, 200 when it was already a favorite.",
    responses={200: {"description": "Already a favorite"}, 204: {"description": "Added"}},
)
def mark_favorite(
    media_id: int = Path(description="Media entry ID"),
    current_user_id: int = Depends(get_current_user_id),
    favorite_service: FavoriteService = Depends(get_favorite_service),
):
    created = favorite_service.mark(current_user_id, media_id)
    if created:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return {"status": "already favorite"}


@router.delete(
    "/{media_id}/favorite",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove from favorites",
)
def unmark_favorite(
    media_id: int = Path(description="Media entry ID"),
    current_user_id: int = Depends(get_current_user_id),
    favorite_service: FavoriteService = Depends(get_favorite_service),
):
    favorite_service.remove(current_user_id, media_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
