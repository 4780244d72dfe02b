"""
Comment Service - Task discussion threads
"""

from sqlalchemy.orm import Session
from typing import List
import logging

from taskboard.models import ActionType, Comment, Task, User
from taskboard.schemas import CommentCreate, CommentResponse
from taskboard.utils.activity_logger import record_activity
from taskboard.utils.converters import to_comment_response

logger = logging.getLogger(__name__)


def list_comments_for_task(db: Session, task_id: int, top_level_only: bool = False) -> List[CommentResponse]:
    """Oldest first; top_level_only drops replies"""
    query = db.query(Comment).filter(Comment.task_id == task_id)
    if top_level_only:
        query = query.filter(Comment.parent_comment_id.is_(None))
    comments = query.order_by(Comment.created_at.asc(), Comment.id.asc()).all()
    return [to_comment_response(comment) for comment in comments]


def create_comment(db: Session, request: CommentCreate) -> CommentResponse:
    """
    Save a comment. An UPDATED activity row is added only when both the task
    and the author resolve; otherwise the comment is stored on its own.
    """
    # Resolve references - a missing task or author is logged, not rejected
    task = db.get(Task, request.task_id)
    user = db.get(User, request.user_id)
    if task is None:
        logger.warning(f"⚠️  Comment for unknown task {request.task_id}")
    if user is None:
        logger.warning(f"⚠️  Comment by unknown user {request.user_id}")

    comment = Comment(
        task=task,
        user=user,
        parent_comment_id=request.parent_comment_id,
        text=request.text,
        category=request.category,
    )
    db.add(comment)
    db.flush()  # Generate comment id

    if task is not None and user is not None:
        record_activity(
            db=db,
            task=task,
            user=user,
            action_type=ActionType.UPDATED,
            description=f"Commented on {task.title}",
            new_value=request.category or "Commented",  # Category shown in the feed
        )

    db.commit()  # Comment and activity row together
    db.refresh(comment)
    logger.info(f"✅ Comment {comment.id} saved")
    return to_comment_response(comment)
