# mediarating/models/media.py

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from mediarating.database import Base

MEDIA_TYPES = ("movie", "series", "game")
AGE_RESTRICTIONS = (0, 6, 12, 16, 18)


class MediaEntryModel(Base):
    __tablename__ = "media_entries"

    media_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    rating = Column(Integer, nullable=False, default=0)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    description = Column(Text, nullable=True)
    media_type = Column(String(20), nullable=True)
    release_year = Column(Integer, nullable=True)
    age_restriction = Column(Integer, nullable=True)
    created_at = Column(DateTime, default=func.current_timestamp(), nullable=False)

    genre_rows = relationship(
        "MediaGenreModel",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="MediaGenreModel.genre",
        lazy="selectin",
    )

    __table_args__ = (
        CheckConstraint("rating BETWEEN 0 AND 10", name="ck_media_rating_range"),
        CheckConstraint(
            "media_type IS NULL OR media_type IN ('movie', 'series', 'game')",
            name="ck_media_type",
        ),
        CheckConstraint(
            "age_restriction IS NULL OR age_restriction IN (0, 6, 12, 16, 18)",
            name="ck_media_age_restriction",
        ),
    )

    @property
    def genres(self):
        return [row.genre for row in self.genre_rows]

    def __repr__(self):
        return f"<MediaEntryModel(media_id={self.media_id}, title='{self.title}')>"
