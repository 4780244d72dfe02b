"""
Services Package - Business logic behind the API routers

Routers import the service modules directly:
    from taskboard.services import task_service
"""

from taskboard.services import (
    activity_service,
    auth_service,
    comment_service,
    task_service,
    user_service,
)

__all__ = [
    "activity_service",
    "auth_service",
    "comment_service",
    "task_service",
    "user_service",
]
