"""
HTML 조각 렌더러: Jinja2 기반.

HTMX 프론트엔드가 부분 교체할 조각만 생성 (전체 페이지 아님):
- 목록 컨테이너 (메시지 <ul>, 태스크 <div>, 사용자 <table>)
- 단일 항목 (토글된 태스크 <li>, 사용자 <tr>, 편집 <tr>)

이스케이프:
- 모든 템플릿 autoescape (< > & " ' 다섯 문자)
- 문자열 조립으로 마크업 만들지 말 것 → 템플릿 추가
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from src.domain.constants import (
    EMPTY_MESSAGES_TEXT,
    EMPTY_TASKS_TEXT,
    EMPTY_USERS_TEXT,
    TASK_LIST_ID,
    USER_AGE_MAX,
    USER_AGE_MIN,
    USER_LIST_ID,
)
from src.domain.schemas import GENDER_LABELS, Message, Task, User

TEMPLATES_DIR = Path(__file__).parent / "templates"


class FragmentRenderer:
    """
    HTMX 조각 렌더러.

    Usage:
        renderer = FragmentRenderer(backend_base_url="http://localhost:8000")
        renderer.render_task_list(tasks)
    """

    def __init__(self, backend_base_url: str = ""):
        """
        Args:
            backend_base_url: hx-* 요청 URL 접두어 (빈 값 = 같은 origin)
        """
        self.backend_base_url = backend_base_url.rstrip("/")
        self._env = Environment(
            loader=FileSystemLoader(TEMPLATES_DIR),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self._env.globals["base_url"] = self.backend_base_url

    def _render(self, template_name: str, **context: object) -> str:
        return self._env.get_template(template_name).render(**context).strip()

    # =========================================================================
    # Messages
    # =========================================================================

    def render_message_list(self, messages: list[Message]) -> str:
        """메시지 목록 <ul>. 비어 있으면 안내 항목."""
        return self._render(
            "message_list.html", messages=messages, empty_text=EMPTY_MESSAGES_TEXT
        )

    def render_message_form_reset(self) -> str:
        """입력창 초기화용 OOB <input> (hx-swap-oob)."""
        return self._render("message_form_reset.html")

    # =========================================================================
    # Tasks
    # =========================================================================

    def render_task_list(self, tasks: list[Task]) -> str:
        """태스크 컨테이너 <div id="task-list">."""
        return self._render(
            "task_list.html",
            tasks=tasks,
            container_id=TASK_LIST_ID,
            empty_text=EMPTY_TASKS_TEXT,
        )

    def render_task_item(self, task: Task) -> str:
        """단일 태스크 <li> (토글 후 교체용)."""
        return self._render("task_item.html", task=task)

    # =========================================================================
    # Users
    # =========================================================================

    def render_user_list(
        self, users: list[User], empty_text: str = EMPTY_USERS_TEXT
    ) -> str:
        """사용자 컨테이너 <div id="user-list"> (테이블)."""
        return self._render(
            "user_list.html",
            users=users,
            container_id=USER_LIST_ID,
            empty_text=empty_text,
        )

    def render_user_row(self, user: User) -> str:
        """단일 사용자 표시 <tr>."""
        return self._render("user_row.html", user=user)

    def render_user_edit_row(self, user: User) -> str:
        """단일 사용자 편집 <tr> (입력 필드 + 저장/취소)."""
        return self._render(
            "user_edit_row.html",
            user=user,
            age_min=USER_AGE_MIN,
            age_max=USER_AGE_MAX,
            gender_options=[(g.value, label) for g, label in GENDER_LABELS.items()],
        )
