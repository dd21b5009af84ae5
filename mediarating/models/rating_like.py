# mediarating/models/rating_like.py

from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func
from mediarating.database import Base


class RatingLikeModel(Base):
    __tablename__ = "rating_likes"

    rating_id = Column(Integer, ForeignKey("ratings.rating_id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True)
    created_at = Column(DateTime, default=func.current_timestamp())

    def __repr__(self):
        return f"<RatingLikeModel(rating_id={self.rating_id}, user_id={self.user_id})>"
