# mediarating/services/comment_service.py

import logging
from typing import List
from sqlalchemy import select
from sqlalchemy.orm import Session
from mediarating.core.auth import owns, utc_now
from mediarating.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from mediarating.models.comment import CommentModel
from mediarating.schemas.comment import Comment, CommentCreate, CommentUpdate
from mediarating.services.media_service import MediaService

logger = logging.getLogger(__name__)


def _clean_text(text: str) -> str:
    text = (text or "").strip()
    if not text:
        raise ValidationError("Comment text cannot be empty")
    return text


class CommentService:
    """Comments on media entries.

    New comments are hidden from the public listing until the owner of the media
    entry approves them. Only the author may edit or delete a comment, approved or not.
    """

    def __init__(self, db: Session, media_service: MediaService):
        self.db = db
        self.media_service = media_service

    def _require_comment(self, comment_id: int) -> CommentModel:
        comment_model = self.db.get(CommentModel, comment_id)
        if not comment_model:
            raise NotFoundError("Comment not found")
        return comment_model

    def get_comment(self, comment_id: int) -> Comment:
        return self._to_schema(self._require_comment(comment_id))

    def create_comment(self, media_id: int, comment_data: CommentCreate, user_id: int) -> Comment:
        text = _clean_text(comment_data.text)
        self.media_service.require_media(media_id)

        now = utc_now()
        comment_model = CommentModel(
            media_id=media_id,
            user_id=user_id,
            text=text,
            approved=False,
            created_at=now,
            updated_at=now,
        )
        self.db.add(comment_model)
        self.db.commit()
        self.db.refresh(comment_model)

        logger.info("Comment %s on media %s awaiting approval", comment_model.comment_id, media_id)
        return self._to_schema(comment_model)

    def get_approved_comments(self, media_id: int) -> List[Comment]:
        self.media_service.require_media(media_id)

        stmt = (
            select(CommentModel)
            .where(CommentModel.media_id == media_id, CommentModel.approved.is_(True))
            .order_by(CommentModel.created_at.desc(), CommentModel.comment_id.desc())
        )
        return [self._to_schema(c) for c in self.db.execute(stmt).scalars().all()]

    def update_comment(self, comment_id: int, comment_data: CommentUpdate, user_id: int) -> Comment:
        comment_model = self._require_comment(comment_id)
        if not owns(user_id, comment_model.user_id):
            raise ForbiddenError("Only the author can edit this comment")

        # editing does not touch the approval state
        comment_model.text = _clean_text(comment_data.text)
        comment_model.updated_at = utc_now()
        self.db.commit()
        self.db.refresh(comment_model)
        return self._to_schema(comment_model)

    def delete_comment(self, comment_id: int, user_id: int) -> None:
        comment_model = self._require_comment(comment_id)
        if not owns(user_id, comment_model.user_id):
            raise ForbiddenError("Only the author can delete this comment")

        self.db.delete(comment_model)
        self.db.commit()

    def approve_comment(self, comment_id: int, user_id: int) -> Comment:
        comment_model = self._require_comment(comment_id)
        media_model = self.media_service.require_media(comment_model.media_id)
        if not owns(user_id, media_model.user_id):
            raise ForbiddenError("Only the owner of the media entry can approve comments")

        if not comment_model.approved:
            comment_model.approved = True
            self.db.commit()
            self.db.refresh(comment_model)
            logger.info("Comment %s approved by user %s", comment_id, user_id)
        return self._to_schema(comment_model)

    @staticmethod
    def _to_schema(comment_model: CommentModel) -> Comment:
        return Comment(
            id=comment_model.comment_id,
            media_id=comment_model.media_id,
            user_id=comment_model.user_id,
            text=comment_model.text,
            approved=comment_model.approved,
            created_at=comment_model.created_at,
            updated_at=comment_model.updated_at,
        )
