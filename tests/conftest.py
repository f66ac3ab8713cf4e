"""
Pytest configuration and shared fixtures.
"""

from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from calgrid.config import ApiSettings, AppSettings, AuthSettings, StorageSettings, UiSettings
from calgrid.data import JsonDocumentStore
from calgrid.domain import CalendarEvent
from calgrid.services import ServiceContext
from calgrid.services.http import create_app

FIXED_TODAY = date(2024, 3, 15)


@pytest.fixture
def today():
    """A Friday used as 'today' wherever a test needs a stable current date."""
    return FIXED_TODAY


@pytest.fixture
def make_event():
    counter = {"next": 0}

    def _make(day: date, start_time: str = "09:00", title: str | None = None, **extra) -> CalendarEvent:
        counter["next"] += 1
        return CalendarEvent(
            id=extra.pop("id", f"evt-{counter['next']}"),
            title=title or f"Event {counter['next']}",
            date=day,
            start_time=start_time,
            end_time=extra.pop("end_time", "10:00"),
            **extra,
        )

    return _make


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        api=ApiSettings(base_url=None, host="127.0.0.1", port=8000),
        auth=AuthSettings(token_secret="calgrid-test-secret-with-enough-bytes", algorithm="HS256"),
        storage=StorageSettings(data_dir=tmp_path / "data"),
        ui=UiSettings(app_name="Calgrid", organization="calgrid", month_cell_limit=3),
    )


@pytest.fixture
def document_store(tmp_path: Path) -> JsonDocumentStore:
    return JsonDocumentStore(tmp_path / "documents.json")


@pytest.fixture
def service_context(settings: AppSettings) -> ServiceContext:
    return ServiceContext(settings=settings)


@pytest.fixture
def api(service_context: ServiceContext) -> TestClient:
    return TestClient(create_app(service_context))


@pytest.fixture
def auth_headers(api: TestClient) -> dict:
    api.post("/api/v1/signup", json={"username": "ada", "password": "lovelace"})
    response = api.post("/api/v1/signin", json={"username": "ada", "password": "lovelace"})
    return {"Authorization": f"Bearer {response.json()['token']}"}
