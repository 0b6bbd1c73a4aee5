"""
User Service: 사용자 CRUD + 검색.

검증 순서:
1. firstName / lastName 필수 (trim)
2. age: None 또는 [0, 130]
3. (update) 대상 id 조회 → 없으면 NotFoundError

검증 실패 시 저장된 레코드는 변경되지 않음.
"""

import logging
from dataclasses import replace

from src.app.services.validate import require_range, require_text
from src.core.store import UserStore
from src.domain.constants import USER_AGE_MAX, USER_AGE_MIN
from src.domain.errors import ErrorCodes, NotFoundError
from src.domain.schemas import Gender, User, UserCommand

logger = logging.getLogger(__name__)


class UserService:
    """
    사용자 서비스.

    Usage:
        service = UserService(UserStore())
        user = service.create_user_single(UserCommand("Eve", "Adams", 40, Gender.FEMALE))
    """

    def __init__(self, store: UserStore):
        self.store = store

    def list_users(self) -> list[User]:
        """전체 사용자 (삽입 순서)."""
        return self.store.find_all()

    def get_user(self, user_id: int) -> User:
        """
        id로 조회.

        Raises:
            NotFoundError: USER_NOT_FOUND
        """
        user = self.store.find_by_id(user_id)
        if user is None:
            raise NotFoundError(ErrorCodes.USER_NOT_FOUND, id=user_id)
        return user

    def create_user(self, command: UserCommand) -> list[User]:
        """사용자 생성 후 갱신된 전체 목록 반환 (HTMX 목록 교체용)."""
        self.create_user_single(command)
        return self.store.find_all()

    def create_user_single(self, command: UserCommand) -> User:
        """
        사용자 생성.

        검증 통과 후에만 id 발급 (실패한 요청이 id를 소모하지 않음).

        Raises:
            InvalidInputError: BLANK_FIELD, OUT_OF_RANGE
        """
        fields = self._validated_fields(command)
        user = self.store.add(**fields)
        logger.info(f"User created: id={user.id}")
        return user

    def update_user(self, user_id: int, command: UserCommand) -> User:
        """
        id 외 모든 필드 교체.

        Raises:
            InvalidInputError: BLANK_FIELD, OUT_OF_RANGE
            NotFoundError: USER_NOT_FOUND
        """
        fields = self._validated_fields(command)
        updated = self.store.modify(user_id, lambda u: replace(u, **fields))
        if updated is None:
            raise NotFoundError(ErrorCodes.USER_NOT_FOUND, id=user_id)
        logger.info(f"User updated: id={user_id}")
        return updated

    def delete_user(self, user_id: int) -> None:
        """
        사용자 삭제.

        Raises:
            NotFoundError: USER_NOT_FOUND
        """
        if not self.store.delete(user_id):
            raise NotFoundError(ErrorCodes.USER_NOT_FOUND, id=user_id)
        logger.info(f"User deleted: id={user_id}")

    def search_users(self, query: str | None, gender: Gender | None) -> list[User]:
        """
        이름 부분 일치 + 성별 필터.

        - query: trim + 소문자, 비어 있으면 조건 없음
        - firstName 또는 lastName에 포함되면 일치 (대소문자 무관)
        - gender: 주어지면 정확히 일치
        - 저장소 순서 유지, 랭킹/페이지네이션 없음
        """
        needle = (query or "").strip().lower()

        def matches(user: User) -> bool:
            if needle and not (
                needle in user.first_name.lower() or needle in user.last_name.lower()
            ):
                return False
            return gender is None or user.gender == gender

        return [u for u in self.store.find_all() if matches(u)]

    def _validated_fields(self, command: UserCommand) -> dict:
        return {
            "first_name": require_text(command.first_name, "firstName"),
            "last_name": require_text(command.last_name, "lastName"),
            "age": require_range(command.age, "age", USER_AGE_MIN, USER_AGE_MAX),
            "gender": command.gender,
        }
