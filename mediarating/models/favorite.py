# mediarating/models/favorite.py

from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from mediarating.database import Base


class FavoriteModel(Base):
    __tablename__ = "favorites"

    favorite_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False)
    media_id = Column(Integer, ForeignKey("media_entries.media_id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, default=func.current_timestamp())

    __table_args__ = (UniqueConstraint("user_id", "media_id", name="unique_user_favorite"),)

    def __repr__(self):
        return f"<FavoriteModel(user_id={self.user_id}, media_id={self.media_id})>"
