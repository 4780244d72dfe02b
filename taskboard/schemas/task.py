"""
Task Schemas - Pydantic models for task operations
"""

from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import date, datetime

# Status and priority stay plain strings here: the task service parses them,
# and an unknown value is a server error rather than a 422.


def _validate_title(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Task title cannot be empty")
    if len(v) > 200:  # tasks.title is String(200)
        raise ValueError("Task title cannot exceed 200 characters")
    return v  # Stored as sent, surrounding whitespace included


class TaskCreate(BaseModel):
    """Schema for creating new task"""
    title: str
    description: Optional[str] = None  # Unbounded TEXT column
    status: str = "PENDING"
    priority: str = "MEDIUM"
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    category_id: Optional[int] = None  # Ignored if no such category
    created_by_id: Optional[int] = None  # Ignored if no such user
    assignee_ids: Optional[List[int]] = None  # Unknown user ids are skipped

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        return _validate_title(v)

class TaskUpdate(BaseModel):
    """
    Schema for updating existing task - all fields optional.
    assignee_ids, when sent, replaces the whole assignment set.
    user_id names who is making the change, for the activity log.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    category_id: Optional[int] = None
    assignee_ids: Optional[List[int]] = None
    user_id: Optional[int] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        if v is None:
            return v
        return _validate_title(v)

class TaskSummaryResponse(BaseModel):
    """Compact shape for board and list views"""
    id: int
    title: str
    description: Optional[str] = None
    status: str
    priority: str
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    category_name: Optional[str] = None
    created_by_username: Optional[str] = None
    assignee_count: int = 0
    assignee_ids: List[int] = []
    assignee_names: List[str] = []
    tags: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TaskDetailResponse(BaseModel):
    """Full task shape for the detail view"""
    id: int
    title: str
    description: Optional[str] = None
    status: str
    priority: str
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    created_by_id: Optional[int] = None
    created_by_username: Optional[str] = None
    assignee_ids: List[int] = []
    assigned_users: List[str] = []
    tags: List[str] = []
    is_deleted: bool = False
    deleted_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
