# mediarating/services/media_service.py

import logging
from typing import List, Optional, Set
from sqlalchemy import select, func, and_, delete, exists
from sqlalchemy.orm import Session, aliased
from mediarating.core.auth import owns
from mediarating.core.config import get_settings
from mediarating.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from mediarating.models.media import MediaEntryModel
from mediarating.models.media_genre import MediaGenreModel
from mediarating.models.rating import RatingModel
from mediarating.models.user import UserModel
from mediarating.schemas.media import (
    MediaCreate,
    MediaEntry,
    MediaSearch,
    MediaUpdate,
    RankedMedia,
)

logger = logging.getLogger(__name__)

RECOMMENDATION_TYPES = ("content", "genre")

# stars at or above this count as "liked" for genre recommendations
LIKED_STARS_THRESHOLD = 4


class MediaService:

    def __init__(self, db: Session):
        self.db = db
        self.settings = get_settings()

    # lookups

    def require_media(self, media_id: int) -> MediaEntryModel:
        media_model = self.db.get(MediaEntryModel, media_id)
        if not media_model:
            raise NotFoundError("Media not found")
        return media_model

    def get_media(self, media_id: int) -> MediaEntry:
        return self.to_schema(self.require_media(media_id))

    def list_media(self, filters: Optional[MediaSearch] = None) -> List[MediaEntry]:
        filters = filters or MediaSearch()
        stmt = select(MediaEntryModel)

        if filters.title and filters.title.strip():
            stmt = stmt.where(MediaEntryModel.title.ilike(f"%{filters.title.strip()}%"))
        if filters.rating is not None:
            stmt = stmt.where(MediaEntryModel.rating == filters.rating)
        if filters.user_id is not None:
            stmt = stmt.where(MediaEntryModel.user_id == filters.user_id)
        if filters.media_type and filters.media_type.strip():
            stmt = stmt.where(MediaEntryModel.media_type == filters.media_type.strip().lower())
        if filters.release_year is not None:
            stmt = stmt.where(MediaEntryModel.release_year == filters.release_year)
        if filters.age_restriction is not None:
            stmt = stmt.where(MediaEntryModel.age_restriction == filters.age_restriction)
        if filters.genre and filters.genre.strip():
            stmt = stmt.where(
                exists().where(
                    and_(
                        MediaGenreModel.media_id == MediaEntryModel.media_id,
                        MediaGenreModel.genre == filters.genre.strip().lower(),
                    )
                )
            )

        stmt = stmt.order_by(*self._sort_order(filters.sort_by))
        media_models = self.db.execute(stmt).scalars().all()
        return [self.to_schema(media_model) for media_model in media_models]

    def _sort_order(self, sort_by: Optional[str]):
        if not sort_by:
            return [MediaEntryModel.media_id]

        if sort_by == "title":
            return [func.lower(MediaEntryModel.title), MediaEntryModel.media_id]
        if sort_by == "rating":
            return [MediaEntryModel.rating.desc(), MediaEntryModel.media_id]
        if sort_by == "id":
            return [MediaEntryModel.media_id]
        if sort_by == "userId":
            return [MediaEntryModel.user_id, MediaEntryModel.media_id]
        if sort_by == "score":
            score = (
                select(func.coalesce(func.avg(RatingModel.stars), 0.0))
                .where(RatingModel.media_id == MediaEntryModel.media_id)
                .correlate(MediaEntryModel)
                .scalar_subquery()
            )
            return [score.desc(), MediaEntryModel.media_id]

        raise ValidationError("Invalid sortBy: must be one of: title, rating, score, id, userId")

    # writes

    def create_media(self, data: MediaCreate, user_id: int) -> MediaEntry:
        title = (data.title or "").strip()
        if not title:
            raise ValidationError("title cannot be empty")

        media_model = MediaEntryModel(
            title=title,
            rating=data.rating,
            user_id=user_id,
            description=data.description,
            media_type=data.media_type,
            release_year=data.release_year,
            age_restriction=data.age_restriction,
        )
        media_model.genre_rows = [MediaGenreModel(genre=genre) for genre in data.genres]

        self.db.add(media_model)
        self.db.commit()
        self.db.refresh(media_model)

        logger.info("Media %s created by user %s", media_model.media_id, user_id)
        return self.to_schema(media_model)

    def update_media(self, media_id: int, data: MediaUpdate, user_id: int) -> MediaEntry:
        media_model = self.require_media(media_id)
        if not owns(user_id, media_model.user_id):
            raise ForbiddenError("Only the creator can edit this media entry")

        changes = data.model_dump(exclude_unset=True)
        if "title" in changes:
            title = (changes["title"] or "").strip()
            if not title:
                raise ValidationError("title cannot be empty")
            changes["title"] = title
        if changes.get("rating", 0) is None:
            # explicit null keeps the current rating
            changes.pop("rating")

        genres = changes.pop("genres", None)
        for field, value in changes.items():
            setattr(media_model, field, value)
        if genres is not None:
            existing = {row.genre: row for row in media_model.genre_rows}
            media_model.genre_rows = [existing.get(genre) or MediaGenreModel(genre=genre) for genre in genres]

        self.db.commit()
        self.db.refresh(media_model)
        return self.to_schema(media_model)

    def delete_media(self, media_id: int, user_id: int) -> None:
        media_model = self.require_media(media_id)
        if not owns(user_id, media_model.user_id):
            raise ForbiddenError("Only the creator can delete this media entry")

        # ratings, comments, favorites and genres go with it (ON DELETE CASCADE)
        self.db.execute(delete(MediaEntryModel).where(MediaEntryModel.media_id == media_id))
        self.db.commit()
        logger.info("Media %s deleted by user %s", media_id, user_id)

    # rankings

    def clamp_limit(self, limit: Optional[int]) -> int:
        if limit is None:
            return self.settings.default_page_limit
        return max(1, min(self.settings.max_page_limit, limit))

    def _ranked_select(self):
        average = func.coalesce(func.avg(RatingModel.stars), 0.0).label("average_rating")
        count = func.count(RatingModel.rating_id).label("rating_count")
        stmt = (
            select(
                MediaEntryModel.media_id,
                MediaEntryModel.title,
                MediaEntryModel.rating,
                MediaEntryModel.user_id,
                average,
                count,
            )
            .outerjoin(RatingModel, RatingModel.media_id == MediaEntryModel.media_id)
            .group_by(
                MediaEntryModel.media_id,
                MediaEntryModel.title,
                MediaEntryModel.rating,
                MediaEntryModel.user_id,
            )
            .order_by(average.desc(), count.desc(), MediaEntryModel.media_id)
        )
        return stmt

    def get_leaderboard(self, limit: Optional[int] = None) -> List[RankedMedia]:
        """Media by average stars, then by number of ratings"""
        stmt = self._ranked_select().limit(self.clamp_limit(limit))
        return [self._to_ranked(row) for row in self.db.execute(stmt).all()]

    def get_recommendations(
        self, user_id: int, limit: Optional[int] = None, rec_type: Optional[str] = None
    ) -> List[RankedMedia]:
        """Media the user has not rated yet.

        content: best rated first.
        genre:   same order, restricted to the user's favorite genre and the genres
                 of media they rated highly; falls back to content when there is
                 no genre signal.
        """
        rec_type = (rec_type or "content").strip().lower()
        if rec_type not in RECOMMENDATION_TYPES:
            raise ValidationError("Invalid type. Must be 'genre' or 'content'")

        own_rating = aliased(RatingModel)
        stmt = self._ranked_select().where(
            ~exists().where(
                and_(
                    own_rating.media_id == MediaEntryModel.media_id,
                    own_rating.user_id == user_id,
                )
            )
        )

        if rec_type == "genre":
            genres = self._preferred_genres(user_id)
            if genres:
                stmt = stmt.where(
                    exists().where(
                        and_(
                            MediaGenreModel.media_id == MediaEntryModel.media_id,
                            MediaGenreModel.genre.in_(genres),
                        )
                    )
                )

        stmt = stmt.limit(self.clamp_limit(limit))
        return [self._to_ranked(row) for row in self.db.execute(stmt).all()]

    def _preferred_genres(self, user_id: int) -> Set[str]:
        genres: Set[str] = set()

        favorite_genre = self.db.execute(
            select(UserModel.favorite_genre).where(UserModel.user_id == user_id)
        ).scalar_one_or_none()
        if favorite_genre and favorite_genre.strip():
            genres.add(favorite_genre.strip().lower())

        liked_stmt = (
            select(MediaGenreModel.genre)
            .join(RatingModel, RatingModel.media_id == MediaGenreModel.media_id)
            .where(
                and_(
                    RatingModel.user_id == user_id,
                    RatingModel.stars >= LIKED_STARS_THRESHOLD,
                )
            )
            .distinct()
        )
        genres.update(self.db.execute(liked_stmt).scalars().all())
        return genres

    # mapping

    @staticmethod
    def to_schema(media_model: MediaEntryModel) -> MediaEntry:
        return MediaEntry(
            id=media_model.media_id,
            title=media_model.title,
            rating=media_model.rating,
            user_id=media_model.user_id,
            description=media_model.description,
            media_type=media_model.media_type,
            release_year=media_model.release_year,
            age_restriction=media_model.age_restriction,
            genres=media_model.genres,
            created_at=media_model.created_at,
        )

    @staticmethod
    def _to_ranked(row) -> RankedMedia:
        return RankedMedia(
            id=row.media_id,
            title=row.title,
            rating=row.rating,
            user_id=row.user_id,
            average_rating=round(float(row.average_rating or 0.0), 2),
            rating_count=row.rating_count or 0,
        )
