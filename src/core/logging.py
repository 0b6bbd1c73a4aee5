"""
Logging setup: 루트 로거 설정

규칙:
- 모듈별 logger = logging.getLogger(__name__)
- 설정은 한 번만 (create_app 반복 호출, 테스트 시 핸들러 중복 방지)
"""

import logging
from typing import Any

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "htmx_demo_console"


def setup_logging(level: str = "INFO") -> None:
    """
    루트 로거 설정.

    이미 설정된 경우 레벨만 갱신.

    Args:
        level: 로그 레벨 이름 (대소문자 무관, 알 수 없으면 INFO)
    """
    root = logging.getLogger()
    root.setLevel(resolve_level(level))

    if any(h.get_name() == HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(handler)


def resolve_level(level: str) -> int:
    """레벨 이름 → logging 상수."""
    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else logging.INFO


def setup_logging_from_config(config: dict[str, Any]) -> None:
    """config의 logging.level 적용."""
    level = (config.get("logging") or {}).get("level", "INFO")
    setup_logging(level)
