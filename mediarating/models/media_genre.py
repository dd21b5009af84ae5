# mediarating/models/media_genre.py

from sqlalchemy import Column, Integer, String, ForeignKey
from mediarating.database import Base


class MediaGenreModel(Base):
    __tablename__ = "media_genres"

    media_id = Column(Integer, ForeignKey("media_entries.media_id", ondelete="CASCADE"), primary_key=True)
    genre = Column(String(100), primary_key=True)

    def __repr__(self):
        return f"<MediaGenreModel(media_id={self.media_id}, genre='{self.genre}')>"
