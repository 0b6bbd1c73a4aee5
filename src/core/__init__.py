"""
Core layer: 저장소와 공용 인프라.

역할:
- id 시퀀스, in-memory 저장소, 로깅 설정
"""

from .ids import IdSequence
from .logging import setup_logging, setup_logging_from_config
from .store import InMemoryStore, MessageStore, TaskStore, UserStore

__all__ = [
    # ids
    "IdSequence",
    # store
    "InMemoryStore",
    "MessageStore",
    "TaskStore",
    "UserStore",
    # logging
    "setup_logging",
    "setup_logging_from_config",
]
