"""
API Package - Exports all API routers
"""

from taskboard.api import activities, auth, categories, comments, tasks, users

__all__ = ["activities", "auth", "categories", "comments", "tasks", "users"]
