"""
test_task_routes.py - Tasks Routes 유닛 테스트

검증 포인트:
1. 조각: 컨테이너, 토글된 <li>, 삭제 시 200 빈 본문
2. API: 생성/토글/삭제 JSON + 상태 코드
3. 없는 id → 404
"""

from fastapi.testclient import TestClient

# =============================================================================
# 1. Fragment Routes
# =============================================================================


class TestTaskFragments:
    """태스크 조각 라우트."""

    def test_get_empty_container(self, client: TestClient):
        response = client.get("/htmx/tasks")

        assert response.status_code == 200
        assert 'id="task-list"' in response.text
        assert "No tasks yet" in response.text

    def test_create_returns_container(self, client: TestClient):
        response = client.post("/htmx/tasks", data={"title": "Write tests"})

        assert response.status_code == 200
        assert response.text.startswith('<div id="task-list"')
        assert '<li data-task-id="1">' in response.text
        assert "Write tests" in response.text

    def test_create_blank_rejected(self, client: TestClient):
        response = client.post("/htmx/tasks", data={"title": " "})

        assert response.status_code == 400
        assert client.get("/api/tasks").json() == []

    def test_toggle_returns_single_item(self, client: TestClient):
        client.post("/htmx/tasks", data={"title": "flip"})

        response = client.put("/htmx/tasks/1")

        assert response.status_code == 200
        assert response.text.startswith('<li data-task-id="1">')
        assert "<s>flip</s>" in response.text
        assert 'id="task-list"' not in response.text

    def test_toggle_unknown(self, client: TestClient):
        response = client.put("/htmx/tasks/42")

        assert response.status_code == 404
        assert response.text == ""

    def test_delete_returns_empty_200(self, client: TestClient):
        client.post("/htmx/tasks", data={"title": "gone"})

        response = client.delete("/htmx/tasks/1")

        assert response.status_code == 200
        assert response.text == ""
        assert client.get("/api/tasks").json() == []

    def test_delete_unknown(self, client: TestClient):
        assert client.delete("/htmx/tasks/1").status_code == 404

    def test_non_integer_id(self, client: TestClient):
        assert client.put("/htmx/tasks/abc").status_code == 422


# =============================================================================
# 2. API Routes
# =============================================================================


class TestTaskApi:
    """태스크 JSON API."""

    def test_list_seeded(self, seeded_client: TestClient):
        data = seeded_client.get("/api/tasks").json()

        assert data[0] == {"id": 1, "title": "Explore HTMX basics", "done": True}
        assert len(data) == 3

    def test_create_returns_single(self, client: TestClient):
        response = client.post("/api/tasks", json={"title": "  New task "})

        assert response.status_code == 200
        assert response.json() == {"id": 1, "title": "New task", "done": False}

    def test_create_blank(self, client: TestClient):
        response = client.post("/api/tasks", json={"title": ""})

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "BLANK_FIELD"

    def test_toggle_twice(self, client: TestClient):
        client.post("/api/tasks", json={"title": "t"})

        first = client.put("/api/tasks/1/toggle").json()
        second = client.put("/api/tasks/1/toggle").json()

        assert first["done"] is True
        assert second["done"] is False

    def test_toggle_unknown(self, client: TestClient):
        response = client.put("/api/tasks/9/toggle")

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "TASK_NOT_FOUND"

    def test_delete(self, client: TestClient):
        client.post("/api/tasks", json={"title": "t"})

        response = client.delete("/api/tasks/1")

        assert response.status_code == 204
        assert response.content == b""
        assert client.delete("/api/tasks/1").status_code == 404
