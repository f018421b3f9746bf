# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from app.services.task_service import TaskService

from .fakes import FakeSupabaseClient


@pytest.fixture()
def supabase_client() -> FakeSupabaseClient:
    return FakeSupabaseClient()


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings that never touch the environment.

    public_dir points at a missing directory so GET / returns the JSON banner.
    """
    return Settings(public_dir=str(tmp_path / "no-public"))


@pytest.fixture()
def service(supabase_client: FakeSupabaseClient) -> TaskService:
    return TaskService(supabase_client)


@pytest.fixture()
def client(settings: Settings, supabase_client: FakeSupabaseClient) -> Iterator[TestClient]:
    app = create_app(settings=settings, client=supabase_client)
    with TestClient(app) as test_client:
        yield test_client
