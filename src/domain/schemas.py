"""
Data schemas for the CRUD demo.

규칙:
- 엔티티는 불변 (frozen dataclass), 변경은 replace()로 새 인스턴스 생성
- JSON 키는 camelCase (firstName, lastName)
- Gender는 닫힌 집합
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

# =============================================================================
# Gender
# =============================================================================

class Gender(str, Enum):
    """사용자 성별 (닫힌 집합)."""
    FEMALE = "FEMALE"
    MALE = "MALE"
    OTHER = "OTHER"
    UNKNOWN = "UNKNOWN"  # 미입력 또는 인식 불가


# 편집 폼 <select> 라벨
GENDER_LABELS: dict[Gender, str] = {
    Gender.FEMALE: "Female",
    Gender.MALE: "Male",
    Gender.OTHER: "Other",
    Gender.UNKNOWN: "Prefer not to say",
}

# =============================================================================
# Entities
# =============================================================================

@dataclass(frozen=True)
class Message:
    """메시지. 생성 후 변경 없음."""
    id: int
    text: str

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용."""
        return {"id": self.id, "text": self.text}


@dataclass(frozen=True)
class Task:
    """태스크. done만 토글로 변경됨."""
    id: int
    title: str
    done: bool = False

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용."""
        return {"id": self.id, "title": self.title, "done": self.done}


@dataclass(frozen=True)
class User:
    """
    사용자.

    id를 제외한 모든 필드 수정 가능.
    age: None 또는 [0, 130]
    """
    id: int
    first_name: str
    last_name: str
    age: int | None = None
    gender: Gender = Gender.UNKNOWN

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용 (camelCase)."""
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "age": self.age,
            "gender": self.gender.value,
        }


# =============================================================================
# Commands
# =============================================================================

@dataclass
class UserCommand:
    """
    사용자 생성/수정 입력.

    라우트에서 파싱만 된 상태 (검증 전).
    """
    first_name: str
    last_name: str
    age: int | None = None
    gender: Gender = Gender.UNKNOWN
