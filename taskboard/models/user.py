"""
User Model - Team members who own, receive and comment on tasks
"""

from sqlalchemy import Column, Integer, String, DateTime, Enum as SQLEnum
from sqlalchemy.orm import relationship
from datetime import datetime
import enum

from taskboard.database import Base


class UserRole(str, enum.Enum):
    """User role - stored only, not enforced by the API"""
    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class UserStatus(str, enum.Enum):
    """Account status - deactivation replaces deletion"""
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class User(Base):
    """
    User table - profile and login credentials.
    Rows are never hard-deleted; deactivation flips status to INACTIVE.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    # Login identity
    username = Column(String(50), unique=True, nullable=False, index=True)  # Login name
    email = Column(String(255), unique=True, nullable=False, index=True)  # Contact address
    password_hash = Column(String(255), nullable=False)  # bcrypt hash, never plaintext

    # Profile
    full_name = Column(String(255), nullable=False)  # Display name
    avatar_color = Column(String(7), nullable=True)  # Hex colour, e.g. #5B8DEF

    role = Column(SQLEnum(UserRole), default=UserRole.EMPLOYEE, nullable=False)  # ADMIN or EMPLOYEE
    status = Column(SQLEnum(UserStatus), default=UserStatus.ACTIVE, nullable=False)  # Only ACTIVE users can log in

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)  # Signup time

    tasks_created = relationship("Task", back_populates="created_by")  # Tasks this user created
    assignments = relationship("TaskAssignment", back_populates="user")  # Tasks assigned to this user

    def __repr__(self):
        return f"<User {self.username} ({self.role})>"
