"""
Task Model - Work items, their assignees and tags
"""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import relationship
from datetime import datetime
import enum

from taskboard.database import Base


class TaskStatus(str, enum.Enum):
    """Task status enumeration - tracks task lifecycle"""
    PENDING = "PENDING"  # Created, not yet planned
    TO_DO = "TO_DO"  # Planned, not started
    IN_PROGRESS = "IN_PROGRESS"  # Currently being worked on
    DONE = "DONE"  # Completed


class TaskPriority(str, enum.Enum):
    """Task priority enumeration"""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


# Association table for the task <-> tag many-to-many
task_tags = Table(
    "task_tags",
    Base.metadata,
    Column("task_id", Integer, ForeignKey("tasks.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class Task(Base):
    """
    Task table - stores work items and their metadata.
    Deletion is soft: is_deleted/deleted_at hide a task from active listings
    while it stays readable by id. Every mutation appends an activity_logs row.
    """
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)

    # Task content
    title = Column(String(200), nullable=False)  # Short description (max 200 chars)
    description = Column(Text, nullable=True)  # Detailed description (optional, unlimited length)

    status = Column(SQLEnum(TaskStatus), default=TaskStatus.PENDING, nullable=False, index=True)  # Current state
    priority = Column(SQLEnum(TaskPriority), default=TaskPriority.MEDIUM, nullable=False)  # Importance level

    # Schedule
    start_date = Column(Date, nullable=True)  # Planned start
    due_date = Column(Date, nullable=True)  # Deadline

    # Soft delete
    is_deleted = Column(Boolean, default=False, nullable=False, index=True)  # In the trash
    deleted_at = Column(DateTime, nullable=True)  # When moved to trash, cleared on restore

    # Optional references - unknown ids are ignored rather than rejected
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    created_by_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)  # When task was created
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)  # Last modification time

    category = relationship("Category", back_populates="tasks")
    created_by = relationship("User", back_populates="tasks_created")
    assignments = relationship(
        "TaskAssignment",
        back_populates="task",
        cascade="all, delete-orphan",  # Assignments live and die with the task's collection
        order_by="TaskAssignment.id",
    )
    tags = relationship("Tag", secondary=task_tags, back_populates="tasks", order_by="Tag.name")
    attachments = relationship("TaskAttachment", back_populates="task", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Task {self.id}: {self.title} ({self.status})>"


class TaskAssignment(Base):
    """Join row between a task and an assigned user"""
    __tablename__ = "task_assignments"

    id = Column(Integer, primary_key=True, index=True)
    task_id = Column(Integer, ForeignKey("tasks.id"), nullable=False, index=True)  # Assigned task
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)  # Assignee
    assigned_at = Column(DateTime, default=datetime.utcnow, nullable=False)  # When the assignment was made

    task = relationship("Task", back_populates="assignments")
    user = relationship("User", back_populates="assignments")

    def __repr__(self):
        return f"<TaskAssignment task={self.task_id} user={self.user_id}>"
