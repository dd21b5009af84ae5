# mediarating/schemas/__init__.py

from .base import CamelModel
from .user import (
    User,
    UserCredentials,
    RegisterResponse,
    TokenResponse,
    UserProfileUpdate,
)
from .media import (
    MediaEntry,
    MediaCreate,
    MediaUpdate,
    MediaSearch,
    RankedMedia,
    AverageRating,
)
from .rating import Rating, RatingRequest, RatingResult
from .comment import Comment, CommentCreate, CommentUpdate

__all__ = [
    "CamelModel",
    "User",
    "UserCredentials",
    "RegisterResponse",
    "TokenResponse",
    "UserProfileUpdate",
    "MediaEntry",
    "MediaCreate",
    "MediaUpdate",
    "MediaSearch",
    "RankedMedia",
    "AverageRating",
    "Rating",
    "RatingRequest",
    "RatingResult",
    "Comment",
    "CommentCreate",
    "CommentUpdate",
]
