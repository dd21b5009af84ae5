# mediarating/services/auth_service.py

import logging
from typing import Optional
from mediarating.core.auth import BEARER_PREFIX, get_password_hash, verify_password
from mediarating.core.config import Settings, get_settings
from mediarating.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidCredentialsError,
    UnauthorizedError,
    ValidationError,
)
from mediarating.schemas.user import User
from mediarating.services.token_service import TokenStore
from mediarating.services.user_service import UserService

logger = logging.getLogger(__name__)


class AuthService:
    """Registration, login and bearer-token authorization"""

    def __init__(self, users: UserService, tokens: TokenStore, settings: Optional[Settings] = None):
        self.users = users
        self.tokens = tokens
        self.settings = settings or get_settings()

    def register(self, username: Optional[str], password: Optional[str]) -> User:
        if username is None or not username.strip():
            raise ValidationError("username required")
        if password is None or len(password) < self.settings.min_password_length:
            raise ValidationError("password too short")
        if self.users.get_user_model_by_username(username):
            raise ConflictError("username already exists")

        user = self.users.create_user(username, get_password_hash(password))
        logger.info("Registered user %s (id=%s)", user.username, user.user_id)
        return user

    def login(self, username: str, password: str) -> str:
        user_model = self.users.get_user_model_by_username(username)
        if not user_model or not verify_password(password, user_model.password_hash):
            logger.info("Rejected login for %r", username)
            raise InvalidCredentialsError()

        token = self.tokens.issue(user_model.user_id, user_model.username)
        logger.info("User %s logged in", user_model.user_id)
        return token

    def authorize(self, authorization: Optional[str]) -> int:
        """User id behind an Authorization header value.

        A missing header or one without the bearer prefix is 401; a token that
        does not verify (unknown, expired) is 403.
        """
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            raise UnauthorizedError("unauthorized")

        user_id = self.tokens.verify(authorization[len(BEARER_PREFIX):])
        if user_id is None:
            raise ForbiddenError("forbidden")
        return user_id

    def logout(self, authorization: Optional[str]) -> None:
        self.authorize(authorization)
        self.tokens.revoke(authorization)
