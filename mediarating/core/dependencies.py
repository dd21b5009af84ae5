# mediarating/core/dependencies.py

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from mediarating.database import get_db
from mediarating.services.auth_service import AuthService
from mediarating.services.comment_service import CommentService
from mediarating.services.favorite_service import FavoriteService
from mediarating.services.media_service import MediaService
from mediarating.services.rating_service import RatingService
from mediarating.services.token_service import SqlTokenStore, TokenStore
from mediarating.services.user_service import UserService

# documents the bearer scheme in OpenAPI; the header itself is checked by AuthService
security = HTTPBearer(auto_error=False)


def get_token_store(db: Session = Depends(get_db)) -> TokenStore:
    return SqlTokenStore(db)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_auth_service(
    user_service: UserService = Depends(get_user_service),
    token_store: TokenStore = Depends(get_token_store),
) -> AuthService:
    return AuthService(user_service, token_store)


def get_media_service(db: Session = Depends(get_db)) -> MediaService:
    return MediaService(db)


def get_rating_service(
    db: Session = Depends(get_db),
    media_service: MediaService = Depends(get_media_service),
) -> RatingService:
    return RatingService(db, media_service)


def get_comment_service(
    db: Session = Depends(get_db),
    media_service: MediaService = Depends(get_media_service),
) -> CommentService:
    return CommentService(db, media_service)


def get_favorite_service(
    db: Session = Depends(get_db),
    media_service: MediaService = Depends(get_media_service),
) -> FavoriteService:
    return FavoriteService(db, media_service)


def authorize_request(request: Request, auth_service: AuthService) -> int:
    """User id for the request's Authorization header (401/403 otherwise)"""
    return auth_service.authorize(request.headers.get("Authorization"))


def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_service: AuthService = Depends(get_auth_service),
) -> int:
    """Id of the logged-in user"""
    return authorize_request(request, auth_service)
