"""
Auth Service - Username/password check
"""

from sqlalchemy.orm import Session
from typing import Optional
import logging

from taskboard.core.security import verify_password
from taskboard.models import User, UserStatus
from taskboard.schemas import LoginResponse
from taskboard.utils.converters import to_user_response

logger = logging.getLogger(__name__)


def authenticate(db: Session, username: Optional[str], password: Optional[str]) -> Optional[LoginResponse]:
    """
    Check credentials and return the user's profile.

    Returns None when the username is missing or unknown, the account is not
    ACTIVE, the password is blank, or the password does not match. Callers must not tell these apart.
    No session token is issued yet; the token field is an empty string.
    """
    # Every rejection below looks the same to the caller
    if username is None:
        logger.debug("Login rejected - no username")
        return None

    user = db.query(User).filter(User.username == username).first()
    if user is None:
        logger.debug(f"Login rejected - unknown user: {username}")
        return None
    if user.status != UserStatus.ACTIVE:
        logger.debug(f"Login rejected - inactive account: {username}")
        return None
    if not password or not password.strip():
        logger.debug(f"Login rejected - blank password: {username}")
        return None
    if not verify_password(password, user.password_hash):
        logger.debug(f"Login rejected - wrong password: {username}")
        return None
    return LoginResponse(token="", user=to_user_response(user))
