"""
Core Package - Configuration and password hashing
"""

from taskboard.core.config import settings, get_settings
from taskboard.core.security import hash_password, verify_password

__all__ = [
    "settings",
    "get_settings",
    "hash_password",
    "verify_password",
]
