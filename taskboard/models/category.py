"""
Lookup Models - Categories and tags used to label tasks
"""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime

from taskboard.database import Base


class Category(Base):
    """Category table - each task belongs to at most one category"""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), unique=True, nullable=False)  # Unique label
    color = Column(String(7), nullable=True)  # Hex colour for the board
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    tasks = relationship("Task", back_populates="category")

    def __repr__(self):
        return f"<Category {self.name}>"


class Tag(Base):
    """Tag table - many-to-many with tasks through task_tags"""
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), unique=True, nullable=False)  # Unique label
    color = Column(String(7), nullable=True)  # Hex colour for the board
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    tasks = relationship("Task", secondary="task_tags", back_populates="tags")

    def __repr__(self):
        return f"<Tag {self.name}>"
