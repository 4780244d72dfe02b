"""
Main Application Package

Task-tracking backend: users, tasks, comments and an activity log.

Usage:
    from taskboard.models import User
    from taskboard.core.config import settings
"""

__version__ = "1.0.0"  # Application version
