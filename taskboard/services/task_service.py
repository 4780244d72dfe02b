"""
Task Service - Task CRUD, soft delete and the activity rows each change produces
"""

from sqlalchemy.orm import Session
from typing import Iterable, List, Optional
from datetime import datetime
import logging

from taskboard.models import Category, Task, TaskAssignment, TaskPriority, TaskStatus, User
from taskboard.schemas import TaskCreate, TaskDetailResponse, TaskSummaryResponse, TaskUpdate
from taskboard.utils.activity_logger import (
    log_task_created,
    log_task_deleted,
    log_task_restored,
    log_task_updated,
)
from taskboard.utils.converters import to_task_detail, to_task_summary

logger = logging.getLogger(__name__)


def parse_status(value: str) -> TaskStatus:
    """Exact enum name; anything else raises ValueError"""
    return TaskStatus(value)


def parse_priority(value: str) -> TaskPriority:
    return TaskPriority(value)


def list_active_tasks(db: Session) -> List[TaskSummaryResponse]:
    tasks = db.query(Task).filter(Task.is_deleted.is_(False)).order_by(Task.id).all()
    return [to_task_summary(task) for task in tasks]


def list_deleted_tasks(db: Session) -> List[TaskSummaryResponse]:
    """Trash view - only soft-deleted tasks"""
    tasks = db.query(Task).filter(Task.is_deleted.is_(True)).order_by(Task.id).all()
    return [to_task_summary(task) for task in tasks]


def list_tasks_by_status(db: Session, status: str) -> List[TaskSummaryResponse]:
    """
    Active tasks in one status. The status name is matched case-insensitively;
    an unknown name raises ValueError.
    """
    task_status = parse_status(status.upper())
    tasks = (
        db.query(Task)
        .filter(Task.is_deleted.is_(False), Task.status == task_status)
        .order_by(Task.id)
        .all()
    )
    return [to_task_summary(task) for task in tasks]


def get_task(db: Session, task_id: int) -> Optional[TaskDetailResponse]:
    """Any task by id, including ones in the trash"""
    task = db.get(Task, task_id)
    return to_task_detail(task) if task else None


def _assign_users(db: Session, task: Task, user_ids: Iterable[int]) -> None:
    """Append one assignment per known user id; unknown and repeated ids are skipped"""
    seen = set()
    for user_id in user_ids:
        if user_id in seen:
            continue
        seen.add(user_id)
        user = db.get(User, user_id)
        if user is None:
            logger.debug(f"⚠️  Assignee {user_id} not found, skipped")
            continue
        task.assignments.append(TaskAssignment(user=user))


def _resolve_category(db: Session, task: Task, category_id: Optional[int]) -> None:
    if category_id is None:
        return
    category = db.get(Category, category_id)
    if category is not None:
        task.category = category
    else:
        logger.debug(f"⚠️  Category {category_id} not found, left unchanged")


def create_task(db: Session, request: TaskCreate) -> TaskDetailResponse:
    """
    Create a task, its assignments and a CREATED activity row in one commit.

    Raises:
        ValueError: Unknown status or priority name
    """
    # Build task from request
    task = Task(
        title=request.title,
        description=request.description,
        status=parse_status(request.status),
        priority=parse_priority(request.priority),
        start_date=request.start_date,
        due_date=request.due_date,
        is_deleted=False,
    )
    # Optional references - unknown ids are left empty
    _resolve_category(db, task, request.category_id)
    if request.created_by_id is not None:
        creator = db.get(User, request.created_by_id)
        if creator is not None:
            task.created_by = creator

    db.add(task)
    db.flush()  # Generate the id before attaching children

    if request.assignee_ids:
        _assign_users(db, task, request.assignee_ids)
        db.flush()

    log_task_created(db, task)  # Same unit of work as the task
    db.commit()  # Task, assignments and activity row together
    db.refresh(task)
    logger.info(f"✅ Task {task.id} created: {task.title}")
    return to_task_detail(task)


def update_task(db: Session, task_id: int, request: TaskUpdate) -> Optional[TaskDetailResponse]:
    """
    Apply the fields present in the request and log exactly one activity row.

    Returns:
        The updated task, or None if no task has this id

    Raises:
        ValueError: Unknown status or priority name
    """
    task = db.get(Task, task_id)
    if task is None:
        return None

    old_status = task.status.value  # Captured before any change
    changes = request.model_dump(exclude_unset=True)  # Only fields the client sent

    if changes.get("title") is not None:
        task.title = changes["title"]
    if changes.get("description") is not None:
        task.description = changes["description"]
    if changes.get("status") is not None:
        task.status = parse_status(changes["status"])
    if changes.get("priority") is not None:
        task.priority = parse_priority(changes["priority"])
    if changes.get("start_date") is not None:
        task.start_date = changes["start_date"]
    if changes.get("due_date") is not None:
        task.due_date = changes["due_date"]
    _resolve_category(db, task, changes.get("category_id"))

    if changes.get("assignee_ids") is not None:
        # Replace wholesale: drop every assignment, then insert the new set
        task.assignments.clear()
        db.flush()
        _assign_users(db, task, changes["assignee_ids"])

    db.flush()  # Assignments visible to the acting-user lookup
    log_task_updated(db, task, old_status, explicit_user_id=changes.get("user_id"))
    db.commit()
    db.refresh(task)
    logger.info(f"✅ Task {task.id} updated")
    return to_task_detail(task)


def soft_delete_task(db: Session, task_id: int) -> bool:
    """Move a task to the trash. Returns False if no task has this id."""
    task = db.get(Task, task_id)
    if task is None:
        return False
    # Soft delete - row stays readable by id
    task.is_deleted = True
    task.deleted_at = datetime.utcnow()
    log_task_deleted(db, task)
    db.commit()
    logger.info(f"🗑️  Task {task_id} moved to trash")
    return True


def restore_task(db: Session, task_id: int) -> Optional[TaskDetailResponse]:
    task = db.get(Task, task_id)
    if task is None:
        return None
    task.is_deleted = False
    task.deleted_at = None  # Cleared on restore
    log_task_restored(db, task)
    db.commit()
    db.refresh(task)
    logger.info(f"♻️  Task {task_id} restored")
    return to_task_detail(task)
