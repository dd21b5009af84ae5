# mediarating/schemas/media.py

from datetime import datetime
from typing import List, Literal, Optional
from pydantic import Field, field_validator
from mediarating.schemas.base import CamelModel

MediaType = Literal["movie", "series", "game"]
AgeRestriction = Literal[0, 6, 12, 16, 18]

MIN_RELEASE_YEAR = 1900


def _check_release_year(value: Optional[int]) -> Optional[int]:
    if value is None:
        return value
    latest = datetime.now().year + 1
    if value < MIN_RELEASE_YEAR or value > latest:
        raise ValueError(f"releaseYear must be between {MIN_RELEASE_YEAR} and {latest}")
    return value


def _clean_genres(value: Optional[List[str]]) -> Optional[List[str]]:
    if value is None:
        return value
    seen = []
    for genre in value:
        genre = genre.strip().lower()
        if genre and genre not in seen:
            seen.append(genre)
    return seen


class MediaEntry(CamelModel):
    id: int = Field(description="Media entry ID")
    title: str = Field(description="Title")
    rating: int = Field(description="Creator supplied rating (0 ~ 10)")
    user_id: int = Field(description="Owner user ID")
    description: Optional[str] = Field(default=None, description="Description")
    media_type: Optional[str] = Field(default=None, description="movie, series or game")
    release_year: Optional[int] = Field(default=None, description="Release year")
    age_restriction: Optional[int] = Field(default=None, description="Age restriction")
    genres: List[str] = Field(default_factory=list, description="Genres")
    created_at: Optional[datetime] = Field(default=None, description="Created at")


class MediaCreate(CamelModel):
    title: str = Field(description="Title")
    rating: int = Field(default=0, ge=0, le=10, description="Creator supplied rating (0 ~ 10)")
    description: Optional[str] = Field(default=None, description="Description")
    media_type: Optional[MediaType] = Field(default=None, description="movie, series or game")
    release_year: Optional[int] = Field(default=None, description="Release year")
    age_restriction: Optional[AgeRestriction] = Field(default=None, description="Age restriction")
    genres: List[str] = Field(default_factory=list, description="Genres")

    @field_validator("release_year")
    @classmethod
    def check_release_year(cls, value):
        return _check_release_year(value)

    @field_validator("genres")
    @classmethod
    def clean_genres(cls, value):
        return _clean_genres(value)


class MediaUpdate(CamelModel):
    """Partial update; unspecified fields keep their value"""

    title: Optional[str] = Field(default=None, description="Title")
    rating: Optional[int] = Field(default=None, ge=0, le=10, description="Creator supplied rating")
    description: Optional[str] = Field(default=None, description="Description")
    media_type: Optional[MediaType] = Field(default=None, description="movie, series or game")
    release_year: Optional[int] = Field(default=None, description="Release year")
    age_restriction: Optional[AgeRestriction] = Field(default=None, description="Age restriction")
    genres: Optional[List[str]] = Field(default=None, description="Genres")

    @field_validator("release_year")
    @classmethod
    def check_release_year(cls, value):
        return _check_release_year(value)

    @field_validator("genres")
    @classmethod
    def clean_genres(cls, value):
        return _clean_genres(value)


class MediaSearch(CamelModel):
    title: Optional[str] = None
    rating: Optional[int] = None
    user_id: Optional[int] = None
    genre: Optional[str] = None
    media_type: Optional[str] = None
    release_year: Optional[int] = None
    age_restriction: Optional[int] = None
    sort_by: Optional[str] = None


class RankedMedia(CamelModel):
    """Leaderboard and recommendation row"""

    id: int = Field(description="Media entry ID")
    title: str = Field(description="Title")
    rating: int = Field(description="Creator supplied rating")
    user_id: int = Field(description="Owner user ID")
    average_rating: float = Field(description="Average stars (1 ~ 5), 0 when unrated")
    rating_count: int = Field(description="Number of ratings")


class AverageRating(CamelModel):
    media_id: int = Field(description="Media entry ID")
    average_rating: float = Field(description="Average stars, 0 when unrated")
    rating_count: int = Field(description="Number of ratings")
