"""
Tasks API - Task CRUD, trash and status filters
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List
import logging

from taskboard.database import get_db
from taskboard.schemas import TaskCreate, TaskDetailResponse, TaskSummaryResponse, TaskUpdate
from taskboard.services import task_service

logger = logging.getLogger(__name__)
router = APIRouter()


def _not_found(task_id: int) -> HTTPException:
    logger.warning(f"⚠️  Task {task_id} not found")
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")


@router.get("/tasks", response_model=List[TaskSummaryResponse])
def get_active_tasks(db: Session = Depends(get_db)):
    """All tasks that are not in the trash (board view)"""
    tasks = task_service.list_active_tasks(db)
    logger.info(f"✅ Returning {len(tasks)} active tasks")
    return tasks


@router.get("/tasks/by-status/{task_status}", response_model=List[TaskSummaryResponse])
def get_tasks_by_status(task_status: str, db: Session = Depends(get_db)):
    """
    Active tasks in one status. Case-insensitive (`in_progress` works).
    An unknown status is not handled here and surfaces as a 500.
    """
    return task_service.list_tasks_by_status(db, task_status)


@router.get("/tasks/{task_id}", response_model=TaskDetailResponse)
def get_task(task_id: int, db: Session = Depends(get_db)):
    """Full task detail; trashed tasks are still returned"""
    task = task_service.get_task(db, task_id)
    if task is None:
        raise _not_found(task_id)
    return task


@router.post("/tasks", response_model=TaskDetailResponse)
def create_task(task_data: TaskCreate, db: Session = Depends(get_db)):
    """
    Create a task.

    Process:
        1. Resolve category and creator (unknown ids ignored)
        2. Save the task
        3. Add one assignment per known assignee id
        4. Log a CREATED activity
    """
    logger.info(f"➡️  Create task: {task_data.title}")
    return task_service.create_task(db, task_data)


@router.put("/tasks/{task_id}", response_model=TaskDetailResponse)
def update_task(task_id: int, task_data: TaskUpdate, db: Session = Depends(get_db)):
    """
    Partial update - omitted fields keep their values.

    Raises:
        404: Task not found
    """
    logger.info(f"➡️  Update task {task_id}")
    task = task_service.update_task(db, task_id, task_data)
    if task is None:
        raise _not_found(task_id)
    return task


@router.delete("/tasks/{task_id}")
def delete_task(task_id: int, db: Session = Depends(get_db)):
    """Soft delete - moves the task to the trash"""
    logger.info(f"➡️  Delete task {task_id}")
    if not task_service.soft_delete_task(db, task_id):
        raise _not_found(task_id)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/trash", response_model=List[TaskSummaryResponse])
def get_trash(db: Session = Depends(get_db)):
    return task_service.list_deleted_tasks(db)


@router.put("/tasks/{task_id}/restore", response_model=TaskDetailResponse)
def restore_task(task_id: int, db: Session = Depends(get_db)):
    logger.info(f"➡️  Restore task {task_id}")
    task = task_service.restore_task(db, task_id)
    if task is None:
        raise _not_found(task_id)
    return task
