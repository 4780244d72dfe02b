"""
Activity Log Schemas
"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class ActivityLogCreate(BaseModel):
    """Manual activity entry - an unknown action_type is recorded as UPDATED"""
    task_id: Optional[int] = None
    user_id: Optional[int] = None
    action_type: str = "UPDATED"
    old_value: Optional[str] = None
    new_value: Optional[str] = None
    description: Optional[str] = None


class ActivityLogResponse(BaseModel):
    id: int
    task_id: Optional[int] = None
    task_title: Optional[str] = None
    user_id: Optional[int] = None
    user_full_name: Optional[str] = None
    action_type: Optional[str] = None
    old_value: Optional[str] = None
    new_value: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
