"""
Error definitions for the CRUD demo.

규칙:
- 조용한 실패 금지 → DomainError 하위 클래스로 명시적 실패
- 입력 검증 실패 → InvalidInputError (HTTP 400)
- 존재하지 않는 id → NotFoundError (HTTP 404)
"""

from typing import Any


class DomainError(Exception):
    """
    서비스 계층에서 발생하는 에러의 기반 클래스.

    Usage:
        raise InvalidInputError("BLANK_FIELD", field="title")
    """

    status_code = 500

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": str(self),
            **self.context,
        }


class InvalidInputError(DomainError):
    """빈 필수 필드, 범위를 벗어난 숫자 등."""

    status_code = 400


class NotFoundError(DomainError):
    """update/delete/edit 대상 id가 없음."""

    status_code = 404


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Invalid Input ===
    BLANK_FIELD = "BLANK_FIELD"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_GENDER = "INVALID_GENDER"

    # === Not Found ===
    TASK_NOT_FOUND = "TASK_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
