"""
Utilities Package - Helper functions and tools

This package contains:
- activity_logger.py: activity log rows for task mutations
- converters.py: ORM row -> response schema mapping
"""

from taskboard.utils.activity_logger import (
    record_activity,
    resolve_acting_user,
    log_task_created,
    log_task_updated,
    log_task_deleted,
    log_task_restored,
)
from taskboard.utils.converters import (
    to_user_response,
    to_task_summary,
    to_task_detail,
    to_comment_response,
    to_activity_response,
)

__all__ = [
    "record_activity",
    "resolve_acting_user",
    "log_task_created",
    "log_task_updated",
    "log_task_deleted",
    "log_task_restored",
    "to_user_response",
    "to_task_summary",
    "to_task_detail",
    "to_comment_response",
    "to_activity_response",
]
