"""
Schemas Package - Exports all Pydantic schemas
"""

from taskboard.schemas.user import UserCreate, UserUpdate, UserResponse
from taskboard.schemas.auth import LoginRequest, LoginResponse
from taskboard.schemas.task import (
    TaskCreate,
    TaskUpdate,
    TaskSummaryResponse,
    TaskDetailResponse,
)
from taskboard.schemas.comment import CommentCreate, CommentResponse
from taskboard.schemas.activity import ActivityLogCreate, ActivityLogResponse
from taskboard.schemas.category import (
    CategoryCreate,
    CategoryResponse,
    TagCreate,
    TagResponse,
)

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "LoginRequest",
    "LoginResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskSummaryResponse",
    "TaskDetailResponse",
    "CommentCreate",
    "CommentResponse",
    "ActivityLogCreate",
    "ActivityLogResponse",
    "CategoryCreate",
    "CategoryResponse",
    "TagCreate",
    "TagResponse",
]
