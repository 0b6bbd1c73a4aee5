"""Domain layer: errors and schemas."""

from .errors import DomainError, ErrorCodes, InvalidInputError, NotFoundError
from .schemas import (
    Gender,
    Message,
    Task,
    User,
    UserCommand,
)

__all__ = [
    "DomainError",
    "ErrorCodes",
    "InvalidInputError",
    "NotFoundError",
    "Gender",
    "Message",
    "Task",
    "User",
    "UserCommand",
]
