"""
Tasks Routes: 태스크 보드.

조각 라우트 (/htmx):
- GET /htmx/tasks → 태스크 컨테이너
- POST /htmx/tasks → 생성 후 컨테이너
- PUT /htmx/tasks/{id} → 토글된 <li>
- DELETE /htmx/tasks/{id} → 200 빈 본문 (hx-swap="outerHTML"로 <li> 제거)

API 라우트 (/api/tasks):
- GET, POST, PUT /{id}/toggle, DELETE /{id}
"""

from typing import Any

from fastapi import APIRouter, Form, Request, Response
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from src.app.routes.common import api_error, fragment_error, get_renderer
from src.app.services.tasks import TaskService
from src.domain.errors import DomainError

# Routers
router = APIRouter()  # HTML fragments
api_router = APIRouter()  # API endpoints


def get_task_service(request: Request) -> TaskService:
    """Request에서 TaskService 가져오기."""
    return request.app.state.task_service


class TaskCreate(BaseModel):
    """POST /api/tasks 본문."""
    title: str


# =============================================================================
# Fragment Routes (HTML)
# =============================================================================

@router.get("/tasks", response_class=HTMLResponse)
async def tasks_fragment(request: Request) -> HTMLResponse:
    """태스크 컨테이너 (HTML 조각)."""
    tasks = get_task_service(request).list_tasks()
    return HTMLResponse(content=get_renderer(request).render_task_list(tasks))


@router.post("/tasks", response_class=HTMLResponse)
async def create_task_fragment(
    request: Request,
    title: str | None = Form(None),
) -> HTMLResponse:
    """태스크 생성 → 갱신된 컨테이너."""
    try:
        tasks = get_task_service(request).create_task(title)
    except DomainError as e:
        return fragment_error(request, e)
    return HTMLResponse(content=get_renderer(request).render_task_list(tasks))


@router.put("/tasks/{task_id}", response_class=HTMLResponse)
async def toggle_task_fragment(request: Request, task_id: int) -> HTMLResponse:
    """완료 토글 → 해당 <li>만 반환."""
    try:
        task = get_task_service(request).toggle_task(task_id)
    except DomainError as e:
        return fragment_error(request, e)
    return HTMLResponse(content=get_renderer(request).render_task_item(task))


@router.delete("/tasks/{task_id}", response_class=HTMLResponse)
async def delete_task_fragment(request: Request, task_id: int) -> HTMLResponse:
    """삭제 → 200 빈 본문."""
    try:
        get_task_service(request).delete_task(task_id)
    except DomainError as e:
        return fragment_error(request, e)
    return HTMLResponse(content="")


# =============================================================================
# API Routes
# =============================================================================

@api_router.get("")
async def list_tasks(request: Request) -> list[dict[str, Any]]:
    """태스크 목록 (JSON)."""
    return [t.to_dict() for t in get_task_service(request).list_tasks()]


@api_router.post("")
async def create_task(request: Request, body: TaskCreate) -> dict[str, Any]:
    """태스크 생성 → 생성된 태스크 (JSON)."""
    try:
        task = get_task_service(request).create_task_single(body.title)
    except DomainError as e:
        raise api_error(request, e) from e
    return task.to_dict()


@api_router.put("/{task_id}/toggle")
async def toggle_task(request: Request, task_id: int) -> dict[str, Any]:
    """완료 토글 (JSON)."""
    try:
        task = get_task_service(request).toggle_task(task_id)
    except DomainError as e:
        raise api_error(request, e) from e
    return task.to_dict()


@api_router.delete("/{task_id}", status_code=204)
async def delete_task(request: Request, task_id: int) -> Response:
    """삭제 → 204."""
    try:
        get_task_service(request).delete_task(task_id)
    except DomainError as e:
        raise api_error(request, e) from e
    return Response(status_code=204)
