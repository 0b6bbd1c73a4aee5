"""
FastAPI Routes.

조각 라우트 (HTML, HTMX) + API 라우트 (JSON)
"""

from . import messages, tasks, users

__all__ = ["messages", "tasks", "users"]
