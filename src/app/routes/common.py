"""
Route 공용 헬퍼: 렌더러 조회 + 에러 매핑.

에러 매핑:
- InvalidInputError → 400
- NotFoundError → 404
- 조각 라우트: 본문 없는 text/html
- API 라우트: detail={"code", "message", ...context}
"""

import logging

from fastapi import HTTPException, Request
from fastapi.responses import HTMLResponse

from src.domain.errors import DomainError
from src.render.fragments import FragmentRenderer

logger = logging.getLogger(__name__)


def get_renderer(request: Request) -> FragmentRenderer:
    """Request에서 FragmentRenderer 가져오기."""
    return request.app.state.renderer


def fragment_error(request: Request, error: DomainError) -> HTMLResponse:
    """조각 라우트용 에러 응답 (빈 본문)."""
    logger.warning(f"{request.method} {request.url.path} rejected: {error}")
    return HTMLResponse(content="", status_code=error.status_code)


def api_error(request: Request, error: DomainError) -> HTTPException:
    """API 라우트용 HTTPException (구조화된 detail)."""
    logger.warning(f"{request.method} {request.url.path} rejected: {error}")
    return HTTPException(status_code=error.status_code, detail=error.to_dict())
