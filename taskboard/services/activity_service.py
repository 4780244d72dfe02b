"""
Activity Service - Read the activity feed and add manual entries
"""

from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from taskboard.models import ActionType, ActivityLog, Task, User
from taskboard.schemas import ActivityLogResponse
from taskboard.utils.activity_logger import record_activity
from taskboard.utils.converters import to_activity_response

logger = logging.getLogger(__name__)


def parse_action_type(value: Optional[str]) -> ActionType:
    """Unknown or missing names fall back to UPDATED instead of failing"""
    try:
        return ActionType(value)
    except ValueError:
        logger.debug(f"⚠️  Unknown action type {value!r}, using UPDATED")
        return ActionType.UPDATED


def get_recent_activities(db: Session, limit: int) -> List[ActivityLogResponse]:
    """Newest first, at most `limit` rows"""
    rows = (
        db.query(ActivityLog)
        .order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())  # Id breaks timestamp ties
        .limit(limit)
        .all()
    )
    return [to_activity_response(row) for row in rows]


def get_activities_for_task(db: Session, task_id: int) -> List[ActivityLogResponse]:
    rows = (
        db.query(ActivityLog)
        .filter(ActivityLog.task_id == task_id)
        .order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
        .all()
    )
    return [to_activity_response(row) for row in rows]


def create_activity_log(
    db: Session,
    task_id: Optional[int],
    user_id: Optional[int],
    action_type: Optional[str],
    old_value: Optional[str] = None,
    new_value: Optional[str] = None,
    description: Optional[str] = None,
) -> ActivityLogResponse:
    """Record an entry by ids; ids that do not resolve leave the reference empty"""
    task = db.get(Task, task_id) if task_id is not None else None
    user = db.get(User, user_id) if user_id is not None else None
    activity = record_activity(
        db=db,
        task=task,
        user=user,
        action_type=parse_action_type(action_type),  # Never fails; defaults to UPDATED
        description=description,
        old_value=old_value,
        new_value=new_value,
    )
    db.commit()
    db.refresh(activity)
    logger.info(f"✅ Activity {activity.id} recorded ({activity.action_type.value})")
    return to_activity_response(activity)
