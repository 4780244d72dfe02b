"""
Users API - User management endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List
import logging

from taskboard.database import get_db
from taskboard.schemas import UserCreate, UserResponse, UserUpdate
from taskboard.services import user_service
from taskboard.services.user_service import UserConflictError

logger = logging.getLogger(__name__)
router = APIRouter()


def _not_found(user_id: int) -> HTTPException:
    logger.warning(f"⚠️  User {user_id} not found")
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


@router.get("", response_model=List[UserResponse])
def get_all_users(db: Session = Depends(get_db)):
    users = user_service.list_users(db)
    logger.info(f"✅ Returning {len(users)} users")
    return users


@router.get("/{user_id}", response_model=UserResponse)
def get_user_by_id(user_id: int, db: Session = Depends(get_db)):
    user = user_service.get_user(db, user_id)
    if user is None:
        raise _not_found(user_id)
    return user


@router.post("", response_model=UserResponse)
def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    """
    Create a user account.

    Raises:
        400: Username or email already registered, or unknown role
    """
    logger.info(f"➡️  Create user: {user_data.username}")
    try:
        return user_service.create_user(db, user_data)
    except UserConflictError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, user_data: UserUpdate, db: Session = Depends(get_db)):
    """
    Partial profile update.

    Raises:
        404: User not found
        400: New username/email already taken, or unknown role/status
    """
    logger.info(f"➡️  Update user {user_id}")
    try:
        user = user_service.update_user(db, user_id, user_data)
    except UserConflictError as e:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if user is None:
        raise _not_found(user_id)
    return user


@router.delete("/{user_id}")
def delete_user(user_id: int, db: Session = Depends(get_db)):
    """Users are never removed - this deactivates the account"""
    logger.info(f"➡️  Deactivate user {user_id}")
    if not user_service.deactivate_user(db, user_id):
        raise _not_found(user_id)
    return Response(status_code=status.HTTP_200_OK)


@router.put("/{user_id}/deactivate", response_model=UserResponse)
def deactivate_user(user_id: int, db: Session = Depends(get_db)):
    logger.info(f"➡️  Deactivate user {user_id}")
    if not user_service.deactivate_user(db, user_id):
        raise _not_found(user_id)
    return user_service.get_user(db, user_id)


@router.put("/{user_id}/activate", response_model=UserResponse)
def activate_user(user_id: int, db: Session = Depends(get_db)):
    logger.info(f"➡️  Activate user {user_id}")
    user = user_service.activate_user(db, user_id)
    if user is None:
        raise _not_found(user_id)
    return user
