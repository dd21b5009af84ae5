# mediarating/models/rating.py

from sqlalchemy import (
    Column,
    Integer,
    Text,
    Boolean,
    DateTime,
    ForeignKey,
    UniqueConstraint,
    CheckConstraint,
)
from sqlalchemy.sql import func
from mediarating.database import Base


class RatingModel(Base):
    __tablename__ = "ratings"

    rating_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False)
    media_id = Column(Integer, ForeignKey("media_entries.media_id", ondelete="CASCADE"), nullable=False)
    stars = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    likes = Column(Integer, nullable=False, default=0)
    confirmed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=func.current_timestamp(), nullable=False)
    updated_at = Column(
        DateTime, default=func.current_timestamp(), onupdate=func.current_timestamp(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("user_id", "media_id", name="unique_user_media_rating"),
        CheckConstraint("stars BETWEEN 1 AND 5", name="ck_rating_stars_range"),
        CheckConstraint("likes >= 0", name="ck_rating_likes_non_negative"),
    )

    def __repr__(self):
        return f"<RatingModel(id={self.rating_id}, media_id={self.media_id}, stars={self.stars})>"
