# mediarating/services/token_service.py

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Optional
from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from mediarating.core.auth import strip_bearer, utc_now
from mediarating.core.config import get_settings
from mediarating.models.token import TokenModel

logger = logging.getLogger(__name__)


class TokenStore(ABC):
    """Opaque bearer token -> user id, with expiry"""

    @abstractmethod
    def issue(self, user_id: int, username: str) -> str:
        ...

    @abstractmethod
    def verify(self, token: Optional[str]) -> Optional[int]:
        """Owning user id of a live token; None for anything else, never raises"""

    @abstractmethod
    def revoke(self, token: Optional[str]) -> bool:
        ...


class SqlTokenStore(TokenStore):
    """Token rows kept in the tokens table; expiry is checked on every lookup"""

    def __init__(self, db: Session, ttl: Optional[timedelta] = None):
        self.db = db
        self.ttl = ttl or timedelta(days=get_settings().token_ttl_days)

    def issue(self, user_id: int, username: str) -> str:
        token = f"{username}-{uuid.uuid4().hex}-mrpToken"
        issued_at = utc_now()
        try:
            self.db.add(
                TokenModel(
                    token=token,
                    user_id=user_id,
                    issued_at=issued_at,
                    expires_at=issued_at + self.ttl,
                )
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return token

    def verify(self, token: Optional[str]) -> Optional[int]:
        raw = strip_bearer(token)
        if raw is None:
            return None
        try:
            stmt = select(TokenModel.user_id).where(
                TokenModel.token == raw,
                TokenModel.expires_at > utc_now(),
            )
            return self.db.execute(stmt).scalar_one_or_none()
        except Exception as e:
            # a failed lookup means no identity, never an error
            self.db.rollback()
            logger.warning("Token lookup failed: %s", e)
            return None

    def revoke(self, token: Optional[str]) -> bool:
        raw = strip_bearer(token)
        if raw is None:
            return False
        try:
            result = self.db.execute(delete(TokenModel).where(TokenModel.token == raw))
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return result.rowcount > 0
