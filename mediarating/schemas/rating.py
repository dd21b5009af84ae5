# mediarating/schemas/rating.py

from datetime import datetime
from typing import Optional
from pydantic import AliasChoices, Field
from mediarating.schemas.base import CamelModel


class RatingRequest(CamelModel):
    # older clients send "rating" instead of "stars"
    stars: int = Field(validation_alias=AliasChoices("stars", "rating"), description="Stars (1 ~ 5)")
    comment: Optional[str] = Field(default=None, description="Optional comment")


class RatingResult(CamelModel):
    id: int = Field(description="Rating ID")
    media_id: int = Field(description="Media entry ID")
    stars: int = Field(description="Stars (1 ~ 5)")
    user_id: int = Field(description="User ID")


class Rating(CamelModel):
    id: int = Field(description="Rating ID")
    user_id: int = Field(description="User ID")
    media_id: int = Field(description="Media entry ID")
    stars: int = Field(description="Stars (1 ~ 5)")
    comment: Optional[str] = Field(default=None, description="Comment")
    likes: int = Field(default=0, description="Like count")
    confirmed: bool = Field(default=False, description="Confirmed by its author")
    created_at: Optional[datetime] = Field(default=None)
    updated_at: Optional[datetime] = Field(default=None)
