"""
Activity Logger Utility - Builds activity log rows for task mutations
"""

from sqlalchemy.orm import Session
from typing import Optional
import logging

from taskboard.models import ActivityLog, ActionType, Task, User

logger = logging.getLogger(__name__)


def record_activity(
    db: Session,
    task: Optional[Task],
    user: Optional[User],
    action_type: ActionType,
    description: Optional[str] = None,
    old_value: Optional[str] = None,
    new_value: Optional[str] = None,
) -> ActivityLog:
    """
    Add an activity row to the session.

    The row is not committed here: it joins the caller's unit of work so the
    task change and its log entry commit (or roll back) together.

    Example:
        record_activity(
            db=db,
            task=task,
            user=task.created_by,
            action_type=ActionType.DELETED,
            description=f"deleted {task.title}",
        )
        db.commit()
    """
    # Create activity log entry
    activity = ActivityLog(
        task=task,  # Affected task
        user=user,  # Who performed the action
        action_type=action_type,  # Event category
        description=description,  # Human-readable description
        old_value=old_value,  # Before
        new_value=new_value,  # After
    )
    db.add(activity)  # Add to session; the caller commits
    logger.debug(
        f"📝 Activity {action_type.value} queued for task "
        f"{task.id if task else None} by user {user.id if user else None}"
    )
    return activity


def resolve_acting_user(db: Session, task: Task, explicit_user_id: Optional[int] = None) -> Optional[User]:
    """
    Pick the user an activity row is attributed to.

    Order: explicit_user_id (when given and found) -> task creator ->
    first assignee -> None. Only updates pass explicit_user_id; create,
    delete and restore start from the creator.
    """
    # Request-supplied user first (updates only)
    if explicit_user_id is not None:
        user = db.get(User, explicit_user_id)
        if user is not None:
            return user
        logger.debug(f"⚠️  Acting user {explicit_user_id} not found, falling back")
    if task.created_by is not None:
        return task.created_by
    if task.assignments:
        return task.assignments[0].user  # First assignee in insertion order
    return None


def log_task_created(db: Session, task: Task) -> Optional[ActivityLog]:
    user = resolve_acting_user(db, task)
    if user is None:
        logger.info(f"⚠️  No acting user for task {task.id}, CREATED not logged")
        return None
    return record_activity(
        db=db,
        task=task,
        user=user,
        action_type=ActionType.CREATED,
        description=f"Started on {task.title}",
        new_value=task.status.value,
    )


def log_task_updated(
    db: Session,
    task: Task,
    old_status: str,
    explicit_user_id: Optional[int] = None,
) -> Optional[ActivityLog]:
    """STATUS_CHANGED when the status moved, otherwise a plain UPDATED row"""
    user = resolve_acting_user(db, task, explicit_user_id)
    if user is None:
        logger.info(f"⚠️  No acting user for task {task.id}, update not logged")
        return None
    # Status change wins over a plain edit
    new_status = task.status.value
    if new_status != old_status:
        return record_activity(
            db=db,
            task=task,
            user=user,
            action_type=ActionType.STATUS_CHANGED,
            description=f"updated status of {task.title}",
            old_value=old_status,
            new_value=new_status,
        )
    return record_activity(
        db=db,
        task=task,
        user=user,
        action_type=ActionType.UPDATED,
        description=f"updated {task.title}",
    )


def log_task_deleted(db: Session, task: Task) -> Optional[ActivityLog]:
    user = resolve_acting_user(db, task)
    if user is None:
        return None
    return record_activity(db=db, task=task, user=user, action_type=ActionType.DELETED,
                           description=f"deleted {task.title}")


def log_task_restored(db: Session, task: Task) -> Optional[ActivityLog]:
    user = resolve_acting_user(db, task)
    if user is None:
        return None
    return record_activity(db=db, task=task, user=user, action_type=ActionType.RESTORED,
                           description=f"restored {task.title}")
