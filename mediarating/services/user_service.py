# mediarating/services/user_service.py

import logging
from typing import Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from mediarating.core.exceptions import ConflictError, NotFoundError, ValidationError
from mediarating.models.user import UserModel
from mediarating.schemas.user import User, UserProfileUpdate

logger = logging.getLogger(__name__)


def is_valid_email(email: str) -> bool:
    at_index = email.find("@")
    return 0 < at_index < len(email) - 1


class UserService:

    def __init__(self, db: Session):
        self.db = db

    def get_user_model_by_username(self, username: str) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.username == username)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_user_model(self, user_id: int) -> Optional[UserModel]:
        return self.db.get(UserModel, user_id)

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        user_model = self.get_user_model(user_id)
        return User.model_validate(user_model) if user_model else None

    def require_user(self, user_id: int) -> User:
        """User or NotFoundError"""
        user = self.get_user_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def create_user(self, username: str, password_hash: str) -> User:
        user_model = UserModel(username=username, password_hash=password_hash)
        try:
            self.db.add(user_model)
            self.db.commit()
        except IntegrityError:
            # lost a race against a concurrent registration
            self.db.rollback()
            raise ConflictError("username already exists")
        self.db.refresh(user_model)
        return User.model_validate(user_model)

    def update_profile(self, user_id: int, profile: UserProfileUpdate) -> User:
        changes = profile.model_dump(exclude_unset=True)
        email = changes.get("email")
        if email and not is_valid_email(email):
            raise ValidationError("invalid email format")

        user_model = self.get_user_model(user_id)
        if not user_model:
            raise NotFoundError("User not found")

        for field, value in changes.items():
            setattr(user_model, field, value)
        self.db.commit()
        self.db.refresh(user_model)

        logger.info("Profile updated for user %s (%s)", user_id, ", ".join(sorted(changes)) or "no fields")
        return User.model_validate(user_model)
