"""
Activities API - Activity feed
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from taskboard.core.config import settings
from taskboard.database import get_db
from taskboard.schemas import ActivityLogCreate, ActivityLogResponse
from taskboard.services import activity_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/recent", response_model=List[ActivityLogResponse])
def get_recent_activities(
    limit: Optional[int] = Query(None, ge=1, description="Number of entries, newest first"),
    db: Session = Depends(get_db),
):
    """
    Most recent activity across all tasks.

    Query parameters:
        - limit: defaults to RECENT_ACTIVITY_DEFAULT_LIMIT, capped at
          RECENT_ACTIVITY_MAX_LIMIT
    """
    if limit is None:
        limit = settings.RECENT_ACTIVITY_DEFAULT_LIMIT
    limit = min(limit, settings.RECENT_ACTIVITY_MAX_LIMIT)
    activities = activity_service.get_recent_activities(db, limit)
    logger.info(f"✅ Returning {len(activities)} recent activities")
    return activities


@router.get("/task/{task_id}", response_model=List[ActivityLogResponse])
def get_task_activities(task_id: int, db: Session = Depends(get_db)):
    return activity_service.get_activities_for_task(db, task_id)


@router.post("", response_model=ActivityLogResponse)
def create_activity(activity_data: ActivityLogCreate, db: Session = Depends(get_db)):
    """Manual entry; an unrecognised action_type is stored as UPDATED"""
    logger.info(f"➡️  Manual activity for task {activity_data.task_id}")
    return activity_service.create_activity_log(
        db,
        task_id=activity_data.task_id,
        user_id=activity_data.user_id,
        action_type=activity_data.action_type,
        old_value=activity_data.old_value,
        new_value=activity_data.new_value,
        description=activity_data.description,
    )
