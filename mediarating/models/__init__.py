# mediarating/models/__init__.py

from .user import UserModel
from .token import TokenModel
from .media import MediaEntryModel
from .media_genre import MediaGenreModel
from .rating import RatingModel
from .rating_like import RatingLikeModel
from .comment import CommentModel
from .favorite import FavoriteModel


__all__ = [
    "UserModel",
    "TokenModel",
    "MediaEntryModel",
    "MediaGenreModel",
    "RatingModel",
    "RatingLikeModel",
    "CommentModel",
    "FavoriteModel",
]
