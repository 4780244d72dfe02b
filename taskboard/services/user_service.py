"""
User Service - Signup, profile edits and account status
"""

from sqlalchemy.orm import Session
from typing import List, Optional
import logging
import random

from taskboard.core.security import hash_password
from taskboard.models import User, UserRole, UserStatus
from taskboard.schemas import UserCreate, UserResponse, UserUpdate
from taskboard.utils.converters import to_user_response

logger = logging.getLogger(__name__)

DEFAULT_AVATAR_COLORS = ("#5B8DEF", "#5ECFB1", "#F5A864", "#F56565", "#9F7AEA", "#48BB78")


class UserConflictError(ValueError):
    """Duplicate username/email or an unknown role/status name"""


def _parse_role(value: str) -> UserRole:
    try:
        return UserRole(value)
    except ValueError:
        raise UserConflictError(f"Unknown role: {value}")


def _parse_status(value: str) -> UserStatus:
    try:
        return UserStatus(value)
    except ValueError:
        raise UserConflictError(f"Unknown status: {value}")


def _username_taken(db: Session, username: str, exclude_id: Optional[int] = None) -> bool:
    query = db.query(User.id).filter(User.username == username)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first() is not None


def _email_taken(db: Session, email: str, exclude_id: Optional[int] = None) -> bool:
    query = db.query(User.id).filter(User.email == email)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first() is not None


def resolve_avatar_color(requested: Optional[str]) -> str:
    if requested and requested.strip():
        return requested
    return random.choice(DEFAULT_AVATAR_COLORS)


def list_users(db: Session) -> List[UserResponse]:
    return [to_user_response(user) for user in db.query(User).order_by(User.id).all()]


def get_user(db: Session, user_id: int) -> Optional[UserResponse]:
    user = db.get(User, user_id)
    return to_user_response(user) if user else None


def create_user(db: Session, request: UserCreate) -> UserResponse:
    """
    Register a new user.

    Raises:
        UserConflictError: Username or email already exists, or unknown role.
            Nothing is persisted in that case.
    """
    # Uniqueness checks before anything is written
    if _username_taken(db, request.username):
        logger.warning(f"⚠️  Signup rejected - username exists: {request.username}")
        raise UserConflictError("Username already exists")
    if _email_taken(db, request.email):
        logger.warning(f"⚠️  Signup rejected - email exists: {request.email}")
        raise UserConflictError("Email already exists")

    user = User(
        username=request.username,
        email=request.email,
        password_hash=hash_password(request.password),  # bcrypt hash, never plaintext
        full_name=request.full_name,
        role=_parse_role(request.role),
        status=UserStatus.ACTIVE,  # New accounts can log in immediately
        avatar_color=resolve_avatar_color(request.avatar_color),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"✅ User created: {user.username} (id={user.id})")
    return to_user_response(user)


def update_user(db: Session, user_id: int, request: UserUpdate) -> Optional[UserResponse]:
    """
    Apply the fields present in the request.

    A changed username or email is checked against every other row first.

    Returns:
        The updated user, or None if no user has this id

    Raises:
        UserConflictError: New username/email already used, or unknown role/status
    """
    user = db.get(User, user_id)
    if user is None:
        return None

    changes = request.model_dump(exclude_unset=True)

    # Username and email must stay unique across other users
    username = (changes.get("username") or "").strip()
    if username and username != user.username:
        if _username_taken(db, username, exclude_id=user.id):
            raise UserConflictError("Username already exists")
        user.username = username

    email = (changes.get("email") or "").strip()
    if email and email != user.email:
        if _email_taken(db, email, exclude_id=user.id):
            raise UserConflictError("Email already exists")
        user.email = email

    if changes.get("full_name") is not None:
        user.full_name = changes["full_name"]
    if changes.get("role") is not None:
        user.role = _parse_role(changes["role"])
    if changes.get("status") is not None:
        user.status = _parse_status(changes["status"])
    if changes.get("avatar_color") is not None:
        user.avatar_color = changes["avatar_color"]
    if changes.get("password"):  # Blank password leaves the hash alone
        user.password_hash = hash_password(changes["password"])

    db.commit()
    db.refresh(user)
    logger.info(f"✅ User {user_id} updated")
    return to_user_response(user)


def _set_status(db: Session, user_id: int, status: UserStatus) -> Optional[User]:
    user = db.get(User, user_id)
    if user is None:
        return None
    user.status = status
    db.commit()
    db.refresh(user)
    logger.info(f"✅ User {user_id} set to {status.value}")
    return user


def deactivate_user(db: Session, user_id: int) -> bool:
    return _set_status(db, user_id, UserStatus.INACTIVE) is not None


def activate_user(db: Session, user_id: int) -> Optional[UserResponse]:
    user = _set_status(db, user_id, UserStatus.ACTIVE)
    return to_user_response(user) if user else None
