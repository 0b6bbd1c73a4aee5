"""
Application Services.

역할:
- messages: 메시지 목록/추가
- tasks: 태스크 생성/토글/삭제
- users: 사용자 CRUD + 검색
- validate: 입력 검증 헬퍼
"""

from .messages import MessageService
from .tasks import TaskService
from .users import UserService

__all__ = [
    "MessageService",
    "TaskService",
    "UserService",
]
