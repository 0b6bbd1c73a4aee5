"""
In-memory 저장소: 엔티티 타입별 id → 엔티티 매핑

규칙:
- 저장소 인스턴스가 엔티티를 독점 소유 (모듈 전역 싱글턴 금지, 생성자 주입)
- 삽입 순서 유지 (dict 순서 보장)
- 각 연산은 개별적으로 원자적 (Lock), 연산 간 트랜잭션 없음
- 동일 id 동시 update → last-writer-wins
- find_all()은 스냅샷 복사본 반환 (live view 아님)
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from typing import Any, Generic, Protocol, TypeVar

from src.core.ids import IdSequence
from src.domain.constants import SEED_MESSAGES, SEED_TASKS, SEED_USERS
from src.domain.schemas import Gender, Message, Task, User

logger = logging.getLogger(__name__)


class _HasId(Protocol):
    @property
    def id(self) -> int: ...


E = TypeVar("E", bound=_HasId)


class InMemoryStore(Generic[E]):
    """
    스레드 안전한 in-memory 저장소.

    Usage:
        store = InMemoryStore(Message)
        msg = store.add(text="hello")
        store.find_by_id(msg.id)
    """

    def __init__(self, factory: Callable[..., E], ids: IdSequence | None = None):
        """
        Args:
            factory: id + 필드 키워드 인자로 엔티티를 생성하는 callable
            ids: id 시퀀스 (기본: 1부터 시작)
        """
        self._factory = factory
        self._ids = ids or IdSequence()
        self._items: dict[int, E] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def find_all(self) -> list[E]:
        """현재 엔티티 스냅샷 (삽입 순서)."""
        with self._lock:
            return list(self._items.values())

    def find_by_id(self, entity_id: int) -> E | None:
        """id로 조회. 없으면 None."""
        with self._lock:
            return self._items.get(entity_id)

    def add(self, **fields: Any) -> E:
        """
        다음 id를 발급해 엔티티 생성 후 추가.

        Returns:
            생성된 엔티티
        """
        with self._lock:
            entity = self._factory(id=self._ids.next(), **fields)
            self._items[entity.id] = entity
            return entity

    def update(self, entity: E) -> E | None:
        """
        동일 id 엔티티를 제자리 교체 (순서 유지).

        Returns:
            교체된 엔티티, id가 없으면 None
        """
        with self._lock:
            if entity.id not in self._items:
                return None
            self._items[entity.id] = entity
            return entity

    def delete(self, entity_id: int) -> bool:
        """삭제. 실제로 제거됐으면 True."""
        with self._lock:
            return self._items.pop(entity_id, None) is not None

    def modify(self, entity_id: int, change: Callable[[E], E]) -> E | None:
        """
        read-modify-write를 락 안에서 수행.

        Args:
            entity_id: 대상 id
            change: 현재 엔티티 → 새 엔티티

        Returns:
            변경된 엔티티, id가 없으면 None
        """
        with self._lock:
            current = self._items.get(entity_id)
            if current is None:
                return None
            updated = change(current)
            self._items[entity_id] = updated
            return updated


# =============================================================================
# Entity Stores
# =============================================================================


class MessageStore(InMemoryStore[Message]):
    """메시지 저장소 (append-only)."""

    def __init__(self, seed: bool = False):
        super().__init__(Message)
        if seed:
            for text in SEED_MESSAGES:
                self.add(text=text)
            logger.debug(f"Seeded {len(SEED_MESSAGES)} messages")


class TaskStore(InMemoryStore[Task]):
    """태스크 저장소."""

    def __init__(self, seed: bool = False):
        super().__init__(Task)
        if seed:
            for title, done in SEED_TASKS:
                self.add(title=title, done=done)
            logger.debug(f"Seeded {len(SEED_TASKS)} tasks")

    def toggle_done(self, task_id: int) -> Task | None:
        """done 반전. 없으면 None."""
        return self.modify(task_id, lambda t: replace(t, done=not t.done))


class UserStore(InMemoryStore[User]):
    """사용자 저장소."""

    def __init__(self, seed: bool = False):
        super().__init__(User)
        if seed:
            for first_name, last_name, age, gender in SEED_USERS:
                self.add(
                    first_name=first_name,
                    last_name=last_name,
                    age=age,
                    gender=Gender(gender),
                )
            logger.debug(f"Seeded {len(SEED_USERS)} users")
