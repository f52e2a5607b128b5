"""Test configuration: settings are read at import time, so env comes first."""

from __future__ import annotations

import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("ALLOWED_ORIGIN", "http://localhost:3000")
os.environ.setdefault("HF_API_KEY", "test-key")
os.environ.setdefault("HF_SECRET", "test-secret")
os.environ.setdefault("MAX_FILE_MB", "10")

from typing import Any  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from model.job import ImageFormat  # noqa: E402


class FakeHiggsfield:
    """In-memory provider: records calls and replays scripted job-set snapshots."""

    def __init__(self, snapshots: list[dict[str, Any]] | None = None) -> None:
        self.snapshots = list(snapshots or [])
        self.uploads: list[tuple[bytes, ImageFormat]] = []
        self.created: list[dict[str, Any]] = []
        self.status_calls = 0
        self.create_response: dict[str, Any] = {"id": "js-1", "jobs": [{"status": "queued"}]}
        self.motions: list[dict[str, Any]] = []
        self.motion_calls = 0

    async def upload_image(self, data: bytes, image_format: ImageFormat) -> str:
        self.uploads.append((data, image_format))
        return "https://cdn.example.com/upload.jpg"

    async def create_job(self, params: dict[str, Any]) -> dict[str, Any]:
        self.created.append(params)
        return self.create_response

    async def get_job_set(self, job_set_id: str) -> dict[str, Any]:
        self.status_calls += 1
        # Last snapshot repeats once the script runs out
        idx = min(self.status_calls, len(self.snapshots)) - 1
        return {"id": job_set_id, **self.snapshots[idx]}

    async def list_motions(self) -> list[dict[str, Any]]:
        self.motion_calls += 1
        return self.motions


class NoSleep:
    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fake_provider() -> FakeHiggsfield:
    return FakeHiggsfield()


@pytest.fixture
def no_sleep() -> NoSleep:
    return NoSleep()


@pytest.fixture
async def async_client(fake_provider):
    from controller.controller_dependencies import get_generation_service
    from controller.generation_controller import generate_rate_limit
    from core.polling import JobStatusPoller
    from main import app
    from service.generation_service import GenerationService

    async def _no_limit():
        return None

    def _service():
        return GenerationService(
            client=fake_provider,
            poller=JobStatusPoller(fake_provider, max_attempts=3, interval_ms=0),
        )

    app.dependency_overrides[generate_rate_limit] = _no_limit
    app.dependency_overrides[get_generation_service] = _service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
