# mediarating/services/rating_service.py

import logging
from typing import List, Optional
from sqlalchemy import select, update, delete, func, case
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from mediarating.core.auth import owns, utc_now
from mediarating.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from mediarating.database import dialect_insert
from mediarating.models.rating import RatingModel
from mediarating.models.rating_like import RatingLikeModel
from mediarating.schemas.media import AverageRating
from mediarating.schemas.rating import Rating, RatingResult
from mediarating.services.media_service import MediaService

logger = logging.getLogger(__name__)

MIN_STARS = 1
MAX_STARS = 5


def check_stars(stars: Optional[int]) -> int:
    if stars is None or stars < MIN_STARS or stars > MAX_STARS:
        raise ValidationError(f"Rating must be between {MIN_STARS} and {MAX_STARS}")
    return stars


class RatingService:

    def __init__(self, db: Session, media_service: MediaService):
        self.db = db
        self.media_service = media_service

    def set_rating(self, user_id: int, media_id: int, stars: int, comment: Optional[str] = None) -> RatingResult:
        """Create or overwrite the caller's rating of a media entry.

        One row per (user, media): a second call overwrites stars and keeps the stored
        comment unless a new one is supplied. The row id is the same either way.
        """
        check_stars(stars)
        self.media_service.require_media(media_id)

        insert_stmt = dialect_insert(self.db, RatingModel).values(
            user_id=user_id,
            media_id=media_id,
            stars=stars,
            comment=comment,
            likes=0,
            confirmed=False,
            created_at=utc_now(),
            updated_at=utc_now(),
        )
        upsert_stmt = insert_stmt.on_conflict_do_update(
            index_elements=[RatingModel.user_id, RatingModel.media_id],
            set_={
                "stars": insert_stmt.excluded.stars,
                "comment": func.coalesce(insert_stmt.excluded.comment, RatingModel.comment),
                "updated_at": utc_now(),
            },
        ).returning(RatingModel.rating_id)

        try:
            rating_id = self.db.execute(upsert_stmt).scalar_one()
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        logger.info("User %s rated media %s with %s stars (rating %s)", user_id, media_id, stars, rating_id)
        return RatingResult(id=rating_id, media_id=media_id, stars=stars, user_id=user_id)

    def _require_rating(self, rating_id: int) -> RatingModel:
        rating_model = self.db.get(RatingModel, rating_id)
        if not rating_model:
            raise NotFoundError("Rating not found")
        return rating_model

    def get_rating(self, rating_id: int) -> Rating:
        return self._to_schema(self._require_rating(rating_id))

    def update_rating(self, rating_id: int, user_id: int, stars: int, comment: Optional[str] = None) -> Rating:
        """Direct edit by rating id; the comment is replaced, None clears it"""
        rating_model = self._require_rating(rating_id)
        if not owns(user_id, rating_model.user_id):
            raise ForbiddenError("Only the author can edit this rating")
        check_stars(stars)

        rating_model.stars = stars
        rating_model.comment = comment
        rating_model.updated_at = utc_now()
        self.db.commit()
        self.db.refresh(rating_model)
        return self._to_schema(rating_model)

    def confirm_rating(self, rating_id: int, user_id: int) -> None:
        rating_model = self._require_rating(rating_id)
        if not owns(user_id, rating_model.user_id):
            raise ForbiddenError("Only the author can confirm this rating")

        rating_model.confirmed = True
        self.db.commit()

    def toggle_like(self, rating_id: int, user_id: int) -> bool:
        """Like or unlike a rating; True when the call added a like.

        The like row and the counter change in the same transaction, so two calls in a
        row leave the counter where it started.
        """
        self._require_rating(rating_id)

        try:
            removed = self.db.execute(
                delete(RatingLikeModel).where(
                    RatingLikeModel.rating_id == rating_id,
                    RatingLikeModel.user_id == user_id,
                )
            ).rowcount

            if removed:
                self.db.execute(
                    update(RatingModel)
                    .where(RatingModel.rating_id == rating_id)
                    .values(likes=case((RatingModel.likes > 0, RatingModel.likes - 1), else_=0))
                )
                liked = False
            else:
                inserted = self.db.execute(
                    dialect_insert(self.db, RatingLikeModel)
                    .values(rating_id=rating_id, user_id=user_id, created_at=utc_now())
                    .on_conflict_do_nothing(index_elements=[RatingLikeModel.rating_id, RatingLikeModel.user_id])
                    .returning(RatingLikeModel.rating_id)
                ).scalar_one_or_none()
                # a concurrent like already counted this row
                if inserted is not None:
                    self.db.execute(
                        update(RatingModel)
                        .where(RatingModel.rating_id == rating_id)
                        .values(likes=RatingModel.likes + 1)
                    )
                liked = True
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        # bulk updates bypass the identity map
        self.db.expire_all()
        return liked

    def average_rating(self, media_id: int) -> AverageRating:
        self.media_service.require_media(media_id)

        row = self.db.execute(
            select(
                func.coalesce(func.avg(RatingModel.stars), 0.0).label("average_rating"),
                func.count(RatingModel.rating_id).label("rating_count"),
            ).where(RatingModel.media_id == media_id)
        ).one()
        return AverageRating(
            media_id=media_id,
            average_rating=round(float(row.average_rating), 2),
            rating_count=row.rating_count,
        )

    def list_user_ratings(self, user_id: int) -> List[Rating]:
        stmt = (
            select(RatingModel)
            .where(RatingModel.user_id == user_id)
            .order_by(RatingModel.created_at.desc(), RatingModel.rating_id.desc())
        )
        return [self._to_schema(rating_model) for rating_model in self.db.execute(stmt).scalars().all()]

    @staticmethod
    def _to_schema(rating_model: RatingModel) -> Rating:
        return Rating(
            id=rating_model.rating_id,
            user_id=rating_model.user_id,
            media_id=rating_model.media_id,
            stars=rating_model.stars,
            comment=rating_model.comment,
            likes=rating_model.likes,
            confirmed=rating_model.confirmed,
            created_at=rating_model.created_at,
            updated_at=rating_model.updated_at,
        )
