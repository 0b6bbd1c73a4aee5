"""
test_task_service.py - TaskService 테스트

검증 포인트:
1. 생성: done=False, 목록/단일 반환
2. 토글: 두 번 → 원래 값
3. 삭제 후 조회 불가
4. 없는 id → NotFoundError
"""

import pytest

from src.app.services.tasks import TaskService
from src.domain.errors import ErrorCodes, InvalidInputError, NotFoundError


class TestCreateTask:
    """태스크 생성."""

    def test_create_single(self, task_service: TaskService):
        task = task_service.create_task_single("  Write report ")

        assert task.title == "Write report"
        assert task.done is False

    def test_create_returns_list(self, task_service: TaskService):
        task_service.create_task("a")

        tasks = task_service.create_task("b")

        assert [t.title for t in tasks] == ["a", "b"]

    def test_create_increments_length_and_id(self, task_service: TaskService):
        first = task_service.create_task_single("a")
        count = len(task_service.list_tasks())

        second = task_service.create_task_single("b")

        assert len(task_service.list_tasks()) == count + 1
        assert second.id > first.id

    def test_blank_title_rejected(self, task_service: TaskService):
        with pytest.raises(InvalidInputError):
            task_service.create_task("")

        assert task_service.list_tasks() == []


class TestToggleTask:
    """완료 토글."""

    def test_toggle_flips(self, task_service: TaskService):
        task = task_service.create_task_single("a")

        assert task_service.toggle_task(task.id).done is True

    def test_toggle_twice_round_trip(self, task_service: TaskService):
        task = task_service.create_task_single("a")

        task_service.toggle_task(task.id)
        result = task_service.toggle_task(task.id)

        assert result.done == task.done

    def test_toggle_unknown(self, task_service: TaskService):
        with pytest.raises(NotFoundError) as exc_info:
            task_service.toggle_task(99)

        assert exc_info.value.code == ErrorCodes.TASK_NOT_FOUND
        assert exc_info.value.status_code == 404


class TestDeleteTask:
    """삭제."""

    def test_delete(self, task_service: TaskService):
        keep = task_service.create_task_single("keep")
        drop = task_service.create_task_single("drop")

        task_service.delete_task(drop.id)

        assert [t.id for t in task_service.list_tasks()] == [keep.id]
        assert task_service.store.find_by_id(drop.id) is None

    def test_delete_unknown(self, task_service: TaskService):
        with pytest.raises(NotFoundError):
            task_service.delete_task(1)

    def test_delete_twice(self, task_service: TaskService):
        task = task_service.create_task_single("a")
        task_service.delete_task(task.id)

        with pytest.raises(NotFoundError):
            task_service.delete_task(task.id)
