# mediarating/api/comments.py

from fastapi import APIRouter, Depends, Path, Response, status
from mediarating.core.dependencies import get_comment_service, get_current_user_id
from mediarating.schemas.comment import Comment, CommentUpdate
from mediarating.services.comment_service import CommentService

router = APIRouter()


@router.put(
    "/{comment_id}",
    response_model=Comment,
    summary="Edit comment",
    description="Only the author may edit. Approval state is unchanged.",
)
def update_comment(
    comment_data: CommentUpdate,
    comment_id: int = Path(description="Comment ID"),
    current_user_id: int = Depends(get_current_user_id),
    comment_service: CommentService = Depends(get_comment_service),
):
    return comment_service.update_comment(comment_id, comment_data, current_user_id)


@router.delete(
    "/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete comment",
    description="Only the author may delete.",
)
def delete_comment(
    comment_id: int = Path(description="Comment ID"),
    current_user_id: int = Depends(get_current_user_id),
    comment_service: CommentService = Depends(get_comment_service),
):
    comment_service.delete_comment(comment_id, current_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{comment_id}/approve",
    response_model=Comment,
    summary="Approve comment",
    description="Makes the comment public. Only the owner of the media entry may approve.",
)
def approve_comment(
    comment_id: int = Path(description="Comment ID"),
    current_user_id: int = Depends(get_current_user_id),
    comment_service: CommentService = Depends(get_comment_service),
):
    return comment_service.approve_comment(comment_id, current_user_id)
