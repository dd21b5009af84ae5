# mediarating/models/user.py

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from mediarating.database import Base


class UserModel(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False)
    password_hash = Column(String(64), nullable=False)
    email = Column(String(255), nullable=True)
    favorite_genre = Column(String(100), nullable=True)
    created_at = Column(DateTime, default=func.current_timestamp(), nullable=False)

    def __repr__(self):
        return f"<UserModel(id={self.user_id}, username='{self.username}')>"
