"""
Activity Log Model - Append-only trail of task mutations
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
from datetime import datetime
import enum

from taskboard.database import Base


class ActionType(str, enum.Enum):
    """What happened to the task"""
    CREATED = "CREATED"  # New task
    UPDATED = "UPDATED"  # Field edits and comments
    STATUS_CHANGED = "STATUS_CHANGED"  # old_value/new_value carry the statuses
    DELETED = "DELETED"  # Moved to trash
    RESTORED = "RESTORED"  # Brought back from trash


class ActivityLog(Base):
    """
    Activity log table - human-readable audit trail.

    Append-only: rows are never updated or deleted.
    Either reference may be absent.
    """
    __tablename__ = "activity_logs"

    id = Column(Integer, primary_key=True, index=True)
    task_id = Column(Integer, ForeignKey("tasks.id"), nullable=True, index=True)  # Task the entry is about
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)  # Acting user
    action_type = Column(SQLEnum(ActionType), nullable=False, index=True)  # Kind of change
    old_value = Column(String(255), nullable=True)  # Previous status, for STATUS_CHANGED
    new_value = Column(String(255), nullable=True)  # New status or comment category
    description = Column(Text, nullable=True)  # Human-readable summary shown in the feed
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)  # When the change happened

    task = relationship("Task")  # Lets responses show the task title
    user = relationship("User")  # Lets responses show the user full name

    def __repr__(self):
        return f"<ActivityLog {self.action_type} task={self.task_id} at {self.created_at}>"
