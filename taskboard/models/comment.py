"""
Comment Model - Discussion on a task
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime

from taskboard.database import Base


class Comment(Base):
    """
    Comment table.

    task_id and user_id are nullable: a comment whose task or author id does
    not resolve is still stored. parent_comment_id is a plain reference
    used for single-level threading; it is not a foreign key.
    """
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    task_id = Column(Integer, ForeignKey("tasks.id"), nullable=True, index=True)  # Task discussed (null if the id did not resolve)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)  # Author (null if the id did not resolve)
    parent_comment_id = Column(Integer, nullable=True)  # Comment being replied to
    text = Column(Text, nullable=False)  # Comment body
    category = Column(String(50), nullable=True)  # e.g. "Started", "Bug", "Completed"
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)  # When posted

    task = relationship("Task")
    user = relationship("User")

    def __repr__(self):
        return f"<Comment {self.id} on task {self.task_id}>"
