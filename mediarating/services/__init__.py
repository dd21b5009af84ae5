# mediarating/services/__init__.py

from .token_service import TokenStore, SqlTokenStore
from .user_service import UserService
from .auth_service import AuthService
from .media_service import MediaService
from .rating_service import RatingService
from .comment_service import CommentService
from .favorite_service import FavoriteService

__all__ = [
    "TokenStore",
    "SqlTokenStore",
    "UserService",
    "AuthService",
    "MediaService",
    "RatingService",
    "CommentService",
    "FavoriteService",
]
