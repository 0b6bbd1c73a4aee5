"""
Messages Routes: 메시지 목록 + 추가.

조각 라우트 (text/html):
- GET /messages, GET /htmx/messages → 메시지 목록
- POST /add-message, POST /htmx/add-message, POST /htmx/messages → 목록 + 입력창 OOB 초기화

API 라우트 (application/json):
- GET /api/messages → 메시지 목록
- POST /api/messages → 추가 후 전체 목록
"""

from typing import Any

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from src.app.routes.common import api_error, fragment_error, get_renderer
from src.app.services.messages import MessageService
from src.domain.errors import DomainError

# Routers
legacy_router = APIRouter()  # HTML fragments (초기 데모 경로, prefix 없음)
router = APIRouter()  # HTML fragments (/htmx)
api_router = APIRouter()  # API endpoints (/api/messages)


def get_message_service(request: Request) -> MessageService:
    """Request에서 MessageService 가져오기."""
    return request.app.state.message_service


class MessageCreate(BaseModel):
    """POST /api/messages 본문."""
    text: str


# =============================================================================
# Fragment Routes (HTML)
# =============================================================================

@legacy_router.get("/messages", response_class=HTMLResponse)
@router.get("/messages", response_class=HTMLResponse)
async def messages_fragment(request: Request) -> HTMLResponse:
    """메시지 목록 (HTML 조각)."""
    messages = get_message_service(request).list_messages()
    return HTMLResponse(content=get_renderer(request).render_message_list(messages))


@legacy_router.post("/add-message", response_class=HTMLResponse)
@router.post("/add-message", response_class=HTMLResponse)
@router.post("/messages", response_class=HTMLResponse)
async def add_message_fragment(
    request: Request,
    message: str | None = Form(None),  # 누락/빈 값 → 서비스에서 400
) -> HTMLResponse:
    """
    메시지 추가 (HTML 조각).

    갱신된 목록 + 입력창 초기화용 OOB <input>.
    """
    try:
        messages = get_message_service(request).add_message(message)
    except DomainError as e:
        return fragment_error(request, e)

    renderer = get_renderer(request)
    return HTMLResponse(
        content=renderer.render_message_list(messages)
        + "\n"
        + renderer.render_message_form_reset()
    )


# =============================================================================
# API Routes
# =============================================================================

@api_router.get("")
async def list_messages(request: Request) -> list[dict[str, Any]]:
    """메시지 목록 (JSON)."""
    return [m.to_dict() for m in get_message_service(request).list_messages()]


@api_router.post("")
async def add_message(request: Request, body: MessageCreate) -> list[dict[str, Any]]:
    """메시지 추가 후 전체 목록 (JSON)."""
    try:
        messages = get_message_service(request).add_message(body.text)
    except DomainError as e:
        raise api_error(request, e) from e
    return [m.to_dict() for m in messages]
