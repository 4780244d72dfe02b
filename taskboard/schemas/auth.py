"""
Auth Schemas - Login request and response
"""

from pydantic import BaseModel
from typing import Optional

from taskboard.schemas.user import UserResponse


class LoginRequest(BaseModel):
    # Missing or null credentials still reach the auth service and get the one 401
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    """Profile of the authenticated user; token is a placeholder until sessions exist"""
    token: str = ""
    user: UserResponse
