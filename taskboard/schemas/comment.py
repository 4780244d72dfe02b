"""
Comment Schemas
"""

from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime


class CommentCreate(BaseModel):
    task_id: int
    user_id: int
    parent_comment_id: Optional[int] = None  # Reply target, not checked
    text: str
    category: Optional[str] = None  # e.g. "Started", "Bug"; echoed into the activity row

    @field_validator("text")
    @classmethod
    def validate_text(cls, v):
        if not v or not v.strip():
            raise ValueError("Comment text cannot be empty")
        return v


class CommentResponse(BaseModel):
    id: int
    task_id: Optional[int] = None
    user_id: Optional[int] = None
    username: Optional[str] = None
    user_full_name: Optional[str] = None
    parent_comment_id: Optional[int] = None
    text: str
    category: Optional[str] = None
    created_at: Optional[datetime] = None
