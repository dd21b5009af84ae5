# mediarating/models/token.py

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from mediarating.database import Base


class TokenModel(Base):
    __tablename__ = "tokens"

    token = Column(String(255), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    issued_at = Column(DateTime, default=func.current_timestamp(), nullable=False)
    expires_at = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<TokenModel(user_id={self.user_id}, expires_at={self.expires_at})>"
