"""Tests for the HTTP endpoint and the scheduled hook."""
import pytest
from fastapi.testclient import TestClient

from config import Settings
from domain.entities import SyncResult
from presentation.api import create_app
from presentation.scheduler import daily_sync_hook


class RecordingRunner:
    def __init__(self, result: SyncResult):
        self.result = result
        self.calls = []

    async def __call__(self, requested_version: str) -> SyncResult:
        self.calls.append(requested_version)
        return self.result


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner(SyncResult(version="9.1.1", loaded=True, enabled=True))


@pytest.fixture
def client(runner):
    with TestClient(create_app(runner)) as test_client:
        yield test_client


class TestDataDragonEndpoint:
    def test_requested_version_is_forwarded(self, client, runner) -> None:
        response = client.post("/dataDragon", json={"version": "9.1.1"})
        assert response.status_code == 200
        assert response.json() == {"version": "9.1.1", "loaded": True, "enabled": True, "error": ""}
        assert runner.calls == ["9.1.1"]

    def test_missing_body_loads_latest(self, client, runner) -> None:
        response = client.post("/dataDragon")
        assert response.status_code == 200
        assert runner.calls == [""]

    def test_empty_version_loads_latest(self, client, runner) -> None:
        client.post("/dataDragon", json={})
        assert runner.calls == [""]

    def test_null_version_loads_latest(self, client, runner) -> None:
        response = client.post("/dataDragon", json={"version": None})
        assert response.status_code == 200
        assert set(response.json()) == {"version", "loaded", "enabled", "error"}
        assert runner.calls == [""]

    @pytest.mark.parametrize(
        "content, content_type",
        [
            (b"version=9.1.1", "application/x-www-form-urlencoded"),
            (b"{not json", "application/json"),
            (b"null", "application/json"),
            (b'{"version": 914}', "application/json"),
        ],
    )
    def test_unreadable_body_loads_latest(self, client, runner, content, content_type) -> None:
        response = client.post("/dataDragon", content=content, headers={"Content-Type": content_type})
        assert response.status_code == 200
        assert response.json() == {"version": "9.1.1", "loaded": True, "enabled": True, "error": ""}
        assert runner.calls == [""]

    def test_failure_is_reported_in_body(self, client, runner) -> None:
        runner.result = SyncResult(error="Traceback ...\nUnknownVersionError: Requested version not found: 13.5")
        response = client.post("/dataDragon", json={"version": "13.5"})
        assert response.status_code == 200
        body = response.json()
        assert body["version"] == ""
        assert body["loaded"] is False
        assert body["enabled"] is False
        assert "UnknownVersionError" in body["error"]


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_daily_hook_starts_nothing(runner) -> None:
    cfg = Settings()
    assert daily_sync_hook(cfg) is None
    assert runner.calls == []
