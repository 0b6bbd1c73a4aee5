"""
Pytest fixtures for the CRUD demo tests.

테스트 구성:
- 저장소/서비스는 매 테스트마다 새 인스턴스 (빈 상태)
- 라우트 테스트는 create_app()으로 격리된 앱 생성
"""

from pathlib import Path

import pytest
import yaml
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app.main import create_app
from src.app.services import MessageService, TaskService, UserService
from src.core.store import MessageStore, TaskStore, UserStore
from src.render.fragments import FragmentRenderer

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


# =============================================================================
# Store / Service Fixtures
# =============================================================================

@pytest.fixture
def message_service() -> MessageService:
    """빈 메시지 서비스."""
    return MessageService(MessageStore())


@pytest.fixture
def task_service() -> TaskService:
    """빈 태스크 서비스."""
    return TaskService(TaskStore())


@pytest.fixture
def user_service() -> UserService:
    """빈 사용자 서비스."""
    return UserService(UserStore())


@pytest.fixture
def renderer() -> FragmentRenderer:
    """같은 origin 기준 렌더러 (hx-* URL 접두어 없음)."""
    return FragmentRenderer()


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def test_config() -> dict:
    """테스트용 설정 (시드 없음, CORS 없음)."""
    return {
        "store": {"seed": False},
        "htmx": {"backend_base_url": ""},
        "logging": {"level": "WARNING"},
    }


@pytest.fixture
def app(test_config: dict) -> FastAPI:
    """빈 저장소로 구성된 앱."""
    return create_app(test_config)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """테스트 클라이언트."""
    return TestClient(app)


@pytest.fixture
def seeded_client(test_config: dict) -> TestClient:
    """시드 데이터가 채워진 앱의 테스트 클라이언트."""
    config = {**test_config, "store": {"seed": True}}
    return TestClient(create_app(config))
