"""
Models Package - Exports all database models for easy importing
"""

# Import all models to register them with SQLAlchemy Base
from taskboard.models.user import User, UserRole, UserStatus
from taskboard.models.category import Category, Tag
from taskboard.models.task import Task, TaskStatus, TaskPriority, TaskAssignment, task_tags
from taskboard.models.attachment import TaskAttachment
from taskboard.models.comment import Comment
from taskboard.models.activity_log import ActivityLog, ActionType

__all__ = [
    "User",
    "UserRole",
    "UserStatus",
    "Category",
    "Tag",
    "Task",
    "TaskStatus",
    "TaskPriority",
    "TaskAssignment",
    "task_tags",
    "TaskAttachment",
    "Comment",
    "ActivityLog",
    "ActionType",
]
