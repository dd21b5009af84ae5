# mediarating/schemas/comment.py

from typing import Optional
from pydantic import Field
from datetime import datetime
from mediarating.schemas.base import CamelModel


class Comment(CamelModel):
    id: int = Field(description="Comment ID")
    media_id: int = Field(description="Media entry ID")
    user_id: int = Field(description="Author user ID")
    text: str = Field(description="Comment text")
    approved: bool = Field(default=False, description="Publicly visible once approved")
    created_at: Optional[datetime] = Field(default=None, description="Created at")
    updated_at: Optional[datetime] = Field(default=None, description="Updated at")


class CommentCreate(CamelModel):
    text: str = Field(description="Comment text", max_length=2000)


class CommentUpdate(CamelModel):
    text: str = Field(description="Comment text", max_length=2000)
