"""
Comments API - Read and post task comments
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
import logging

from taskboard.database import get_db
from taskboard.schemas import CommentCreate, CommentResponse
from taskboard.services import comment_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/task/{task_id}", response_model=List[CommentResponse])
def get_comments_for_task(
    task_id: int,
    top_level_only: bool = Query(False, description="Exclude replies"),
    db: Session = Depends(get_db),
):
    return comment_service.list_comments_for_task(db, task_id, top_level_only=top_level_only)


@router.post("", response_model=CommentResponse)
def create_comment(comment_data: CommentCreate, db: Session = Depends(get_db)):
    """
    Post a comment on a task.

    The comment is saved even when the task or user id does not exist;
    the activity feed only records comments where both resolve.
    """
    logger.info(f"➡️  New comment on task {comment_data.task_id} by user {comment_data.user_id}")
    return comment_service.create_comment(db, comment_data)
