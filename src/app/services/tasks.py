"""
Task Service: 태스크 생성, 완료 토글, 삭제.
"""

import logging

from src.app.services.validate import require_text
from src.core.store import TaskStore
from src.domain.errors import ErrorCodes, NotFoundError
from src.domain.schemas import Task

logger = logging.getLogger(__name__)


class TaskService:
    """
    태스크 서비스.

    Usage:
        service = TaskService(TaskStore())
        task = service.create_task_single("Write report")
        service.toggle_task(task.id)
    """

    def __init__(self, store: TaskStore):
        self.store = store

    def list_tasks(self) -> list[Task]:
        """전체 태스크 (삽입 순서)."""
        return self.store.find_all()

    def create_task(self, title: str | None) -> list[Task]:
        """태스크 생성 후 갱신된 전체 목록 반환 (HTMX 목록 교체용)."""
        self.create_task_single(title)
        return self.store.find_all()

    def create_task_single(self, title: str | None) -> Task:
        """
        태스크 생성 (done=False).

        Raises:
            InvalidInputError: BLANK_FIELD
        """
        task = self.store.add(title=require_text(title, "title"), done=False)
        logger.info(f"Task created: id={task.id}")
        return task

    def toggle_task(self, task_id: int) -> Task:
        """
        done 반전.

        Raises:
            NotFoundError: TASK_NOT_FOUND
        """
        task = self.store.toggle_done(task_id)
        if task is None:
            raise NotFoundError(ErrorCodes.TASK_NOT_FOUND, id=task_id)
        logger.info(f"Task toggled: id={task_id}, done={task.done}")
        return task

    def delete_task(self, task_id: int) -> None:
        """
        태스크 삭제.

        Raises:
            NotFoundError: TASK_NOT_FOUND
        """
        if not self.store.delete(task_id):
            raise NotFoundError(ErrorCodes.TASK_NOT_FOUND, id=task_id)
        logger.info(f"Task deleted: id={task_id}")
