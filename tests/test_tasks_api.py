# tests/test_tasks_api.py

from __future__ import annotations

import uuid
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

from .fakes import FailingSupabaseClient, FakeSupabaseClient


def _create(client: TestClient, **body) -> dict:
    response = client.post("/api/tasks", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_with_title_only_uses_defaults(client: TestClient) -> None:
    task = _create(client, title="Buy milk")

    assert task["id"]
    assert task["title"] == "Buy milk"
    assert task["description"] == ""
    assert task["priority"] == "medium"
    assert task["completed"] is False
    assert task["tags"] == []
    assert task["due_date"] is None
    assert task["created_at"]
    assert "updated_at" not in task


def test_create_with_all_fields(client: TestClient) -> None:
    task = _create(
        client,
        title="Plan trip",
        description="book flights",
        priority="high",
        tags=["travel", "family"],
        due_date="2030-07-01",
    )

    assert task["priority"] == "high"
    assert task["tags"] == ["travel", "family"]
    assert task["due_date"] == "2030-07-01"
    assert task["description"] == "book flights"


@pytest.mark.parametrize("body", [{}, {"title": ""}, {"title": "   "}, {"title": 42}, {"description": "no title"}])
def test_create_without_title_is_rejected(
    client: TestClient, supabase_client: FakeSupabaseClient, body: dict
) -> None:
    response = client.post("/api/tasks", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Title is required"}
    assert supabase_client.rows() == []


def test_create_with_non_object_body_is_rejected(client: TestClient) -> None:
    response = client.post("/api/tasks", content=b"not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400

    response = client.post("/api/tasks", json=["title"])
    assert response.status_code == 400


def test_create_drops_invalid_optional_fields(client: TestClient) -> None:
    task = _create(
        client,
        title="Loose input",
        priority="urgent",
        tags="not-a-list",
        due_date=12345,
        completed=True,
        unknown="ignored",
    )

    assert task["priority"] == "medium"
    assert task["tags"] == []
    assert task["due_date"] is None
    assert task["completed"] is False
    assert "unknown" not in task


def test_get_by_id(client: TestClient) -> None:
    created = _create(client, title="Find me")

    response = client.get(f"/api/tasks/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.parametrize("task_id", ["garbage", str(uuid.uuid4())])
def test_get_missing_or_malformed_is_404(client: TestClient, task_id: str) -> None:
    response = client.get(f"/api/tasks/{task_id}")

    assert response.status_code == 404
    assert response.json() == {"error": "Task not found"}


def test_update_completed_keeps_other_fields(client: TestClient) -> None:
    created = _create(client, title="Water plants", tags=["home"], priority="low")

    response = client.put(f"/api/tasks/{created['id']}", json={"completed": True})

    assert response.status_code == 200
    updated = response.json()
    assert updated["completed"] is True
    for key in ("id", "title", "description", "priority", "tags", "due_date", "created_at"):
        assert updated[key] == created[key]
    assert datetime.fromisoformat(updated["updated_at"]) >= datetime.fromisoformat(updated["created_at"])

    assert client.get(f"/api/tasks/{created['id']}").json() == updated


def test_update_ignores_mistyped_fields(client: TestClient) -> None:
    created = _create(client, title="Stay put", due_date="2030-01-01")

    response = client.put(
        f"/api/tasks/{created['id']}",
        json={"completed": "yes", "priority": "critical", "title": "", "description": "new text"},
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["completed"] is False
    assert updated["priority"] == "medium"
    assert updated["title"] == "Stay put"
    assert updated["description"] == "new text"
    assert updated["due_date"] == "2030-01-01"


def test_update_null_due_date_clears_it(client: TestClient) -> None:
    created = _create(client, title="Dentist", due_date="2030-03-15")

    updated = client.put(f"/api/tasks/{created['id']}", json={"due_date": None}).json()

    assert updated["due_date"] is None


@pytest.mark.parametrize("task_id", ["garbage", str(uuid.uuid4())])
def test_update_missing_is_404(client: TestClient, supabase_client: FakeSupabaseClient, task_id: str) -> None:
    response = client.put(f"/api/tasks/{task_id}", json={"completed": True})

    assert response.status_code == 404
    assert response.json() == {"error": "Task not found"}
    assert supabase_client.rows() == []


def test_delete_then_get_and_delete_are_404(client: TestClient) -> None:
    created = _create(client, title="Short lived")

    response = client.delete(f"/api/tasks/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Task deleted successfully"}

    assert client.get(f"/api/tasks/{created['id']}").status_code == 404
    assert client.delete(f"/api/tasks/{created['id']}").status_code == 404


def test_list_empty(client: TestClient) -> None:
    response = client.get("/api/tasks")

    assert response.status_code == 200
    assert response.json() == []


def test_list_filters(client: TestClient, supabase_client: FakeSupabaseClient) -> None:
    high = _create(client, title="high open", priority="high")
    done_high = _create(client, title="high done", priority="high")
    _create(client, title="low open", priority="low")
    client.put(f"/api/tasks/{done_high['id']}", json={"completed": True})

    titles = [t["title"] for t in client.get("/api/tasks", params={"priority": "high"}).json()]
    assert sorted(titles) == ["high done", "high open"]

    both = client.get("/api/tasks", params={"priority": "high", "completed": "true"}).json()
    assert [t["id"] for t in both] == [done_high["id"]]

    open_tasks = client.get("/api/tasks", params={"completed": "false"}).json()
    assert sorted(t["title"] for t in open_tasks) == ["high open", "low open"]
    assert high["id"] in {t["id"] for t in open_tasks}


def test_list_orders_newest_first(client: TestClient, supabase_client: FakeSupabaseClient) -> None:
    for i, created_at in enumerate(["2024-01-01T00:00:00+00:00", "2024-03-01T00:00:00+00:00", "2024-02-01T00:00:00+00:00"]):
        supabase_client.rows().append(
            {"id": str(uuid.uuid4()), "title": f"t{i}", "completed": False, "priority": "medium", "created_at": created_at}
        )

    titles = [t["title"] for t in client.get("/api/tasks").json()]

    assert titles == ["t1", "t2", "t0"]


def test_list_unknown_filter_values_are_ignored(client: TestClient) -> None:
    _create(client, title="one")

    response = client.get("/api/tasks", params={"priority": "urgent", "completed": "maybe"})

    assert response.status_code == 200
    assert len(response.json()) == 1


def test_bare_tasks_path_is_an_alias(client: TestClient) -> None:
    created = client.post("/tasks", json={"title": "via alias"})
    assert created.status_code == 201

    assert client.get(f"/api/tasks/{created.json()['id']}").status_code == 200
    assert [t["title"] for t in client.get("/tasks").json()] == ["via alias"]


def test_store_failure_returns_500(settings: Settings) -> None:
    app = create_app(settings=settings, client=FailingSupabaseClient("database is down"))

    with TestClient(app) as failing:
        for response in (
            failing.get("/api/tasks"),
            failing.get(f"/api/tasks/{uuid.uuid4()}"),
            failing.post("/api/tasks", json={"title": "x"}),
            failing.put(f"/api/tasks/{uuid.uuid4()}", json={"completed": True}),
            failing.delete(f"/api/tasks/{uuid.uuid4()}"),
        ):
            assert response.status_code == 500
            assert response.json() == {"error": "database is down"}


def test_health_and_root(client: TestClient) -> None:
    assert client.get("/api/health").json() == {"status": "healthy", "service": "task-api"}
    assert client.get("/").json()["message"] == "Task API"


def test_static_client_is_served(tmp_path) -> None:
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<h1>Tasks</h1>", encoding="utf-8")
    app = create_app(settings=Settings(public_dir=str(public)), client=FakeSupabaseClient())

    with TestClient(app) as static_client:
        assert "<h1>Tasks</h1>" in static_client.get("/").text
        assert static_client.get("/api/tasks").json() == []
