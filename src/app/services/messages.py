"""
Message Service: 메시지 목록 + 추가.

메시지는 append-only (수정/삭제 없음).
"""

import logging

from src.app.services.validate import require_text
from src.core.store import MessageStore
from src.domain.schemas import Message

logger = logging.getLogger(__name__)


class MessageService:
    """
    메시지 서비스.

    Usage:
        service = MessageService(MessageStore())
        service.add_message("hello")
    """

    def __init__(self, store: MessageStore):
        self.store = store

    def list_messages(self) -> list[Message]:
        """전체 메시지 (삽입 순서)."""
        return self.store.find_all()

    def add_message(self, text: str | None) -> list[Message]:
        """
        메시지 추가 후 갱신된 전체 목록 반환.

        Raises:
            InvalidInputError: BLANK_FIELD
        """
        message = self.store.add(text=require_text(text, "message"))
        logger.info(f"Message added: id={message.id}")
        return self.store.find_all()
