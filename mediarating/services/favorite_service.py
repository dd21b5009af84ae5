# mediarating/services/favorite_service.py

import logging
from typing import List
from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from mediarating.core.auth import utc_now
from mediarating.core.exceptions import NotFoundError
from mediarating.database import dialect_insert
from mediarating.models.favorite import FavoriteModel
from mediarating.models.media import MediaEntryModel
from mediarating.schemas.media import MediaEntry
from mediarating.services.media_service import MediaService

logger = logging.getLogger(__name__)


class FavoriteService:
    """Favorites as a per-user set of media entries"""

    def __init__(self, db: Session, media_service: MediaService):
        self.db = db
        self.media_service = media_service

    def mark(self, user_id: int, media_id: int) -> bool:
        """Add to favorites; False when it was already there"""
        self.media_service.require_media(media_id)

        stmt = (
            dialect_insert(self.db, FavoriteModel)
            .values(user_id=user_id, media_id=media_id, created_at=utc_now())
            .on_conflict_do_nothing(index_elements=[FavoriteModel.user_id, FavoriteModel.media_id])
            .returning(FavoriteModel.favorite_id)
        )
        try:
            favorite_id = self.db.execute(stmt).scalar_one_or_none()
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        return favorite_id is not None

    def unmark(self, user_id: int, media_id: int) -> bool:
        """Remove from favorites; False when it was not a favorite"""
        try:
            result = self.db.execute(
                delete(FavoriteModel).where(
                    FavoriteModel.user_id == user_id,
                    FavoriteModel.media_id == media_id,
                )
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        return result.rowcount > 0

    def remove(self, user_id: int, media_id: int) -> None:
        if not self.unmark(user_id, media_id):
            raise NotFoundError("Favorite not found")

    def list_favorites(self, user_id: int) -> List[MediaEntry]:
        stmt = (
            select(MediaEntryModel)
            .join(FavoriteModel, FavoriteModel.media_id == MediaEntryModel.media_id)
            .where(FavoriteModel.user_id == user_id)
            .order_by(FavoriteModel.created_at.desc(), FavoriteModel.favorite_id.desc())
        )
        media_models = self.db.execute(stmt).scalars().all()
        return [self.media_service.to_schema(media_model) for media_model in media_models]
