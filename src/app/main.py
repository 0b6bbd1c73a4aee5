"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.app.routes import messages, tasks, users
from src.app.services import MessageService, TaskService, UserService
from src.core.logging import setup_logging_from_config
from src.core.store import MessageStore, TaskStore, UserStore
from src.render.fragments import FragmentRenderer

logger = logging.getLogger(__name__)

# 설정 파일 경로 override 용 환경 변수
CONFIG_ENV_VAR = "HTMX_DEMO_CONFIG"

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """
    설정 파일 로드.

    우선순위: 인자 → HTMX_DEMO_CONFIG → 프로젝트 루트 default.yaml
    파일이 없으면 빈 dict.
    """
    if config_path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            config_path = Path(env_path)
        else:
            config_path = Path(__file__).parent.parent.parent / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """애플리케이션 생명주기 (시작/종료 로그)."""
    logger.info(
        f"Started with {len(app.state.message_service.store)} messages, "
        f"{len(app.state.task_service.store)} tasks, "
        f"{len(app.state.user_service.store)} users"
    )

    yield

    # 종료 시 in-memory 상태는 버려짐
    logger.info("Shutting down, in-memory state discarded")


# =============================================================================
# App Factory
# =============================================================================


def create_app(config: dict | None = None) -> FastAPI:
    """
    FastAPI 앱 생성.

    호출마다 새 저장소 인스턴스를 만들어 주입 (테스트 격리).

    Args:
        config: 설정 dict (None이면 load_config())
    """
    if config is None:
        config = load_config()

    setup_logging_from_config(config)

    app = FastAPI(
        title="HTMX CRUD Demo",
        description="HTMX 프론트엔드용 HTML 조각 + JSON API (messages, tasks, users)",
        version="0.1.0",
        lifespan=lifespan,
    )

    # State (저장소 → 서비스 주입)
    seed = bool((config.get("store") or {}).get("seed", True))
    base_url = (config.get("htmx") or {}).get("backend_base_url", "") or ""

    app.state.config = config
    app.state.message_service = MessageService(MessageStore(seed=seed))
    app.state.task_service = TaskService(TaskStore(seed=seed))
    app.state.user_service = UserService(UserStore(seed=seed))
    app.state.renderer = FragmentRenderer(backend_base_url=base_url)

    # CORS (정적 프론트엔드가 다른 포트에서 서빙됨)
    allowed_origins = (config.get("cors") or {}).get("allowed_origins") or []
    if allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allowed_origins,
            allow_methods=CORS_METHODS,
            allow_headers=["*"],
        )

    # 조각 라우트 (HTML)
    app.include_router(messages.legacy_router, prefix="", tags=["Messages"])
    app.include_router(messages.router, prefix="/htmx", tags=["Messages"])
    app.include_router(tasks.router, prefix="/htmx", tags=["Tasks"])
    app.include_router(users.router, prefix="/htmx", tags=["Users"])

    # API 라우트 (JSON)
    app.include_router(messages.api_router, prefix="/api/messages", tags=["Messages API"])
    app.include_router(tasks.api_router, prefix="/api/tasks", tags=["Tasks API"])
    app.include_router(users.api_router, prefix="/api/users", tags=["Users API"])

    @app.get("/")
    async def root() -> dict[str, Any]:
        """엔드포인트 안내."""
        return {
            "message": "HTMX CRUD Demo",
            "endpoints": {
                "messages": "/htmx/messages",
                "tasks": "/htmx/tasks",
                "users": "/htmx/users",
                "api": ["/api/messages", "/api/tasks", "/api/users"],
            },
        }

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    return app


# =============================================================================
# App Instance
# =============================================================================

app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    server_config = app.state.config.get("server") or {}
    uvicorn.run(
        "src.app.main:app",
        host=server_config.get("host", "127.0.0.1"),
        port=int(server_config.get("port", 8000)),
        reload=True,
    )
