"""
Users Routes: 사용자 CRUD + 검색.

조각 라우트 (/htmx):
- GET /htmx/users → 사용자 컨테이너 (테이블)
- POST /htmx/users → 생성 후 컨테이너
- GET /htmx/users/search?q=&gender= → 검색 결과 컨테이너
- GET /htmx/users/{id}, /htmx/users/{id}/row → 표시 <tr>
- GET /htmx/users/{id}/edit → 편집 <tr>
- PUT /htmx/users/{id} → 수정 후 표시 <tr>
- DELETE /htmx/users/{id} → 200 빈 본문

API 라우트 (/api/users):
- GET, GET /search, POST, GET /{id}, PUT /{id}, DELETE /{id}

주의: /search 는 /{user_id} 보다 먼저 등록 (int 변환 422 방지)
"""

from typing import Any

from fastapi import APIRouter, Form, Request, Response
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field

from src.app.routes.common import api_error, fragment_error, get_renderer
from src.app.services.users import UserService
from src.app.services.validate import (
    parse_gender,
    parse_gender_filter,
    parse_optional_int,
)
from src.domain.constants import EMPTY_SEARCH_TEXT
from src.domain.errors import DomainError
from src.domain.schemas import UserCommand

# Routers
router = APIRouter()  # HTML fragments
api_router = APIRouter()  # API endpoints


def get_user_service(request: Request) -> UserService:
    """Request에서 UserService 가져오기."""
    return request.app.state.user_service


class UserPayload(BaseModel):
    """POST/PUT /api/users 본문 (camelCase)."""
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    age: int | None = None
    gender: str | None = None  # 인식 불가 → UNKNOWN

    def to_command(self) -> UserCommand:
        return UserCommand(
            first_name=self.first_name,
            last_name=self.last_name,
            age=self.age,
            gender=parse_gender(self.gender),
        )


def _form_command(
    first_name: str | None,
    last_name: str | None,
    age: str | None,
    gender: str | None,
) -> UserCommand:
    """폼 값 → UserCommand. age는 빈 값/숫자 아님 → None."""
    return UserCommand(
        first_name=first_name or "",
        last_name=last_name or "",
        age=parse_optional_int(age),
        gender=parse_gender(gender),
    )


# =============================================================================
# Fragment Routes (HTML)
# =============================================================================

@router.get("/users", response_class=HTMLResponse)
async def users_fragment(request: Request) -> HTMLResponse:
    """사용자 컨테이너 (HTML 조각)."""
    users = get_user_service(request).list_users()
    return HTMLResponse(content=get_renderer(request).render_user_list(users))


@router.post("/users", response_class=HTMLResponse)
async def create_user_fragment(
    request: Request,
    first_name: str | None = Form(None, alias="firstName"),
    last_name: str | None = Form(None, alias="lastName"),
    age: str | None = Form(None),
    gender: str | None = Form(None),
) -> HTMLResponse:
    """사용자 생성 → 갱신된 컨테이너."""
    command = _form_command(first_name, last_name, age, gender)
    try:
        users = get_user_service(request).create_user(command)
    except DomainError as e:
        return fragment_error(request, e)
    return HTMLResponse(content=get_renderer(request).render_user_list(users))


@router.get("/users/search", response_class=HTMLResponse)
async def search_users_fragment(
    request: Request,
    q: str | None = None,
    gender: str | None = None,
) -> HTMLResponse:
    """
    사용자 검색 (HTML 조각).

    프론트엔드에서 debounce 후 호출.
    """
    try:
        users = get_user_service(request).search_users(q, parse_gender_filter(gender))
    except DomainError as e:
        return fragment_error(request, e)
    return HTMLResponse(
        content=get_renderer(request).render_user_list(users, empty_text=EMPTY_SEARCH_TEXT)
    )


@router.get("/users/{user_id}", response_class=HTMLResponse)
@router.get("/users/{user_id}/row", response_class=HTMLResponse)
async def user_row_fragment(request: Request, user_id: int) -> HTMLResponse:
    """표시용 <tr> (편집 취소 시)."""
    try:
        user = get_user_service(request).get_user(user_id)
    except DomainError as e:
        return fragment_error(request, e)
    return HTMLResponse(content=get_renderer(request).render_user_row(user))


@router.get("/users/{user_id}/edit", response_class=HTMLResponse)
async def user_edit_fragment(request: Request, user_id: int) -> HTMLResponse:
    """편집용 <tr>."""
    try:
        user = get_user_service(request).get_user(user_id)
    except DomainError as e:
        return fragment_error(request, e)
    return HTMLResponse(content=get_renderer(request).render_user_edit_row(user))


@router.put("/users/{user_id}", response_class=HTMLResponse)
async def update_user_fragment(
    request: Request,
    user_id: int,
    first_name: str | None = Form(None, alias="firstName"),
    last_name: str | None = Form(None, alias="lastName"),
    age: str | None = Form(None),
    gender: str | None = Form(None),
) -> HTMLResponse:
    """수정 → 표시용 <tr>."""
    command = _form_command(first_name, last_name, age, gender)
    try:
        user = get_user_service(request).update_user(user_id, command)
    except DomainError as e:
        return fragment_error(request, e)
    return HTMLResponse(content=get_renderer(request).render_user_row(user))


@router.delete("/users/{user_id}", response_class=HTMLResponse)
async def delete_user_fragment(request: Request, user_id: int) -> HTMLResponse:
    """삭제 → 200 빈 본문 (hx-swap="outerHTML"로 <tr> 제거)."""
    try:
        get_user_service(request).delete_user(user_id)
    except DomainError as e:
        return fragment_error(request, e)
    return HTMLResponse(content="")


# =============================================================================
# API Routes
# =============================================================================

@api_router.get("")
async def list_users(request: Request) -> list[dict[str, Any]]:
    """사용자 목록 (JSON)."""
    return [u.to_dict() for u in get_user_service(request).list_users()]


@api_router.get("/search")
async def search_users(
    request: Request,
    q: str | None = None,
    gender: str | None = None,
) -> list[dict[str, Any]]:
    """사용자 검색 (JSON)."""
    try:
        users = get_user_service(request).search_users(q, parse_gender_filter(gender))
    except DomainError as e:
        raise api_error(request, e) from e
    return [u.to_dict() for u in users]


@api_router.post("")
async def create_user(request: Request, body: UserPayload) -> dict[str, Any]:
    """사용자 생성 → 생성된 사용자 (JSON)."""
    try:
        user = get_user_service(request).create_user_single(body.to_command())
    except DomainError as e:
        raise api_error(request, e) from e
    return user.to_dict()


@api_router.get("/{user_id}")
async def get_user(request: Request, user_id: int) -> dict[str, Any]:
    """사용자 상세 (JSON)."""
    try:
        user = get_user_service(request).get_user(user_id)
    except DomainError as e:
        raise api_error(request, e) from e
    return user.to_dict()


@api_router.put("/{user_id}")
async def update_user(
    request: Request, user_id: int, body: UserPayload
) -> dict[str, Any]:
    """사용자 수정 (JSON)."""
    try:
        user = get_user_service(request).update_user(user_id, body.to_command())
    except DomainError as e:
        raise api_error(request, e) from e
    return user.to_dict()


@api_router.delete("/{user_id}", status_code=204)
async def delete_user(request: Request, user_id: int) -> Response:
    """삭제 → 204."""
    try:
        get_user_service(request).delete_user(user_id)
    except DomainError as e:
        raise api_error(request, e) from e
    return Response(status_code=204)
