"""
User Schemas - Pydantic models for request/response validation
"""

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator
from typing import Optional
from datetime import datetime


def _require_text(value: str, label: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{label} cannot be empty")
    return value.strip()


class UserCreate(BaseModel):
    """Schema for user signup"""
    username: str
    email: EmailStr  # Validates email format automatically
    password: str  # Plaintext password (hashed before storage)
    full_name: str
    role: str = "EMPLOYEE"  # Parsed against UserRole by the service
    avatar_color: Optional[str] = None  # Random palette colour when omitted

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        return _require_text(v, "Username")

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v):
        return _require_text(v, "Full name")

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        if not v or not v.strip():
            raise ValueError("Password cannot be empty")
        return v  # Not trimmed - whitespace is part of the secret


class UserUpdate(BaseModel):
    """Schema for updating a user - only fields sent in the request are applied"""
    username: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None  # Re-hashed only when non-empty
    role: Optional[str] = None
    status: Optional[str] = None
    avatar_color: Optional[str] = None


class UserResponse(BaseModel):
    """Public profile - never includes the password hash"""
    id: int
    username: str
    full_name: str
    email: str
    role: str
    status: str
    avatar_color: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
