"""
Converters - Map ORM rows to response schemas

All functions are pure and tolerate missing relationships.
"""

from typing import Optional

from taskboard.models import ActivityLog, Comment, Task, User
from taskboard.schemas import (
    ActivityLogResponse,
    CommentResponse,
    TaskDetailResponse,
    TaskSummaryResponse,
    UserResponse,
)


def _enum_value(value) -> Optional[str]:
    if value is None:
        return None
    return getattr(value, "value", value)


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        full_name=user.full_name,
        email=user.email,
        role=_enum_value(user.role),
        status=_enum_value(user.status),
        avatar_color=user.avatar_color,
        created_at=user.created_at,
    )


def to_task_summary(task: Task) -> TaskSummaryResponse:
    assignees = [a.user for a in task.assignments if a.user is not None]
    return TaskSummaryResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        status=_enum_value(task.status),
        priority=_enum_value(task.priority),
        start_date=task.start_date,
        due_date=task.due_date,
        category_name=task.category.name if task.category else None,
        created_by_username=task.created_by.username if task.created_by else None,
        assignee_count=len(assignees),
        assignee_ids=[u.id for u in assignees],
        assignee_names=[u.full_name for u in assignees],
        tags=[tag.name for tag in task.tags],
        created_at=task.created_at,
        updated_at=task.updated_at,
    )


def to_task_detail(task: Task) -> TaskDetailResponse:
    assignees = [a.user for a in task.assignments if a.user is not None]
    return TaskDetailResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        status=_enum_value(task.status),
        priority=_enum_value(task.priority),
        start_date=task.start_date,
        due_date=task.due_date,
        category_id=task.category_id,
        category_name=task.category.name if task.category else None,
        created_by_id=task.created_by_id,
        created_by_username=task.created_by.username if task.created_by else None,
        assignee_ids=[u.id for u in assignees],
        assigned_users=[u.full_name for u in assignees],
        tags=[tag.name for tag in task.tags],
        is_deleted=bool(task.is_deleted),
        deleted_at=task.deleted_at,
        created_at=task.created_at,
        updated_at=task.updated_at,
    )


def to_comment_response(comment: Comment) -> CommentResponse:
    user = comment.user
    return CommentResponse(
        id=comment.id,
        task_id=comment.task_id,
        user_id=comment.user_id,
        username=user.username if user else None,
        user_full_name=user.full_name if user else None,
        parent_comment_id=comment.parent_comment_id,
        text=comment.text,
        category=comment.category,
        created_at=comment.created_at,
    )


def to_activity_response(activity: ActivityLog) -> ActivityLogResponse:
    return ActivityLogResponse(
        id=activity.id,
        task_id=activity.task.id if activity.task else activity.task_id,
        task_title=activity.task.title if activity.task else None,
        user_id=activity.user.id if activity.user else activity.user_id,
        user_full_name=activity.user.full_name if activity.user else None,
        action_type=_enum_value(activity.action_type),
        old_value=activity.old_value,
        new_value=activity.new_value,
        description=activity.description,
        created_at=activity.created_at,
    )
