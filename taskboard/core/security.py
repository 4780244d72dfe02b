"""
Security Module - Password hashing and verification
"""

from passlib.context import CryptContext
import logging

from taskboard.core.config import settings

logger = logging.getLogger(__name__)

# Password hashing context - bcrypt with configurable cost factor
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",  # Automatically upgrade old hashes
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """
    Hash a plaintext password using bcrypt.

    bcrypt salts every hash, so hashing the same password twice gives
    two different strings; use verify_password() to compare.

    Example:
        hashed = hash_password("secret123")
        # Returns: $2b$12$abc...xyz (60 characters)
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plaintext password against a stored bcrypt hash.

    Returns:
        True if the password matches, False otherwise (including a
        malformed or empty stored hash)
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.error(f"❌ Password verification error: {str(e)}")
        return False  # Corrupted hash - deny access
