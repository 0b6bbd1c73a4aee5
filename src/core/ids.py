"""
ID 생성: 저장소별 정수 id 시퀀스

규칙:
- id는 프로세스 수명 동안 단조 증가 (재사용 금지)
- 삭제된 id도 다시 발급하지 않음
"""

import itertools
import threading


class IdSequence:
    """
    스레드 안전한 정수 id 발급기.

    Usage:
        seq = IdSequence()
        seq.next()  # 1
        seq.next()  # 2
    """

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()
        self._last: int | None = None

    def next(self) -> int:
        """다음 id 발급."""
        with self._lock:
            value = next(self._counter)
            self._last = value
            return value

    @property
    def last(self) -> int | None:
        """마지막으로 발급한 id (아직 없으면 None)."""
        return self._last
