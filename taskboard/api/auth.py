"""
Authentication API - Login and logout
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
import logging

from taskboard.database import get_db
from taskboard.schemas import LoginRequest, LoginResponse
from taskboard.services import auth_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """
    Authenticate by username and password.

    Returns:
        LoginResponse with the user's profile (token is empty for now)

    Raises:
        401: Unknown user, inactive account, blank or wrong password.
             One message for all of them.
    """
    logger.info(f"➡️  Login attempt for username: {credentials.username}")

    response = auth_service.authenticate(db, credentials.username, credentials.password)
    if response is None:
        logger.warning(f"⚠️  Login failed for username: {credentials.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password, or account is inactive",
        )

    logger.info(f"✅ Login successful: {credentials.username}")
    return response


@router.post("/logout", status_code=status.HTTP_200_OK)
def logout():
    """
    Logout acknowledgement.

    No server-side session exists; the client discards its stored profile.
    """
    logger.info("➡️  Logout request")
    return {"message": "Logged out successfully"}
