"""
Validation helpers: 입력 검증 + 폼 값 파싱.

규칙:
- 필수 문자열: trim 후 비어 있으면 reject (BLANK_FIELD)
- 숫자: 선언된 범위 밖이면 reject (OUT_OF_RANGE)
- 통과한 문자열은 trim된 값으로 저장
"""

from typing import Any

from src.domain.errors import ErrorCodes, InvalidInputError
from src.domain.schemas import Gender


def require_text(value: str | None, field: str) -> str:
    """
    필수 문자열 검증.

    Args:
        value: 원본 입력
        field: 에러 컨텍스트용 필드 이름

    Returns:
        trim된 값

    Raises:
        InvalidInputError: BLANK_FIELD
    """
    if value is None or not value.strip():
        raise InvalidInputError(ErrorCodes.BLANK_FIELD, field=field)
    return value.strip()


def require_range(value: int | None, field: str, lo: int, hi: int) -> int | None:
    """
    숫자 범위 검증 (None은 통과).

    Raises:
        InvalidInputError: OUT_OF_RANGE
    """
    if value is None:
        return None
    if not lo <= value <= hi:
        raise InvalidInputError(
            ErrorCodes.OUT_OF_RANGE, field=field, value=value, min=lo, max=hi
        )
    return value


def parse_optional_int(raw: Any) -> int | None:
    """
    폼 숫자 값 파싱.

    빈 값/숫자 아님 → None (폼에서 비워둔 age와 동일 취급)
    """
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def parse_gender(raw: str | None) -> Gender:
    """
    성별 파싱 (대소문자 무관).

    없음/인식 불가 → UNKNOWN
    """
    if raw is None:
        return Gender.UNKNOWN
    try:
        return Gender(raw.strip().upper())
    except ValueError:
        return Gender.UNKNOWN


def parse_gender_filter(raw: str | None) -> Gender | None:
    """
    검색용 성별 필터 파싱.

    빈 값 → None (필터 없음), 인식 불가 → reject

    Raises:
        InvalidInputError: INVALID_GENDER
    """
    if raw is None or not raw.strip():
        return None
    try:
        return Gender(raw.strip().upper())
    except ValueError as e:
        raise InvalidInputError(ErrorCodes.INVALID_GENDER, value=raw) from e
