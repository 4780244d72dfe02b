"""
Task Attachment Model - File metadata rows (no upload endpoint yet)
"""

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from datetime import datetime

from taskboard.database import Base


class TaskAttachment(Base):
    __tablename__ = "task_attachments"

    id = Column(Integer, primary_key=True, index=True)
    task_id = Column(Integer, ForeignKey("tasks.id"), nullable=False, index=True)
    file_name = Column(String(255), nullable=False)  # Original file name
    file_path = Column(String(500), nullable=False)  # Storage location
    file_size = Column(BigInteger, nullable=True)  # Bytes
    mime_type = Column(String(100), nullable=True)
    uploaded_by_id = Column(Integer, ForeignKey("users.id"), nullable=False)  # Uploader
    uploaded_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    task = relationship("Task", back_populates="attachments")
    uploaded_by = relationship("User")

    def __repr__(self):
        return f"<TaskAttachment {self.file_name} on task {self.task_id}>"
