# Test configuration and fixtures
import os
import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

# Set test environment variables before the app reads its settings
os.environ["SUPABASE_URL"] = "http://localhost:54321"
os.environ["SUPABASE_SERVICE_ROLE_KEY"] = "test-service-role-key"
os.environ["SENDGRID_API_KEY"] = "SG.test"
os.environ["EMAIL_FROM"] = "reminders@example.com"
os.environ["APP_BASE_URL"] = "https://tasks.example.com"

from fastapi.testclient import TestClient  # noqa: E402

from task_reminder.api.deps import get_email_service, get_task_repository  # noqa: E402
from task_reminder.main import app  # noqa: E402
from task_reminder.models.email import DeliveryResult  # noqa: E402
from task_reminder.models.task import Task  # noqa: E402

from .fakes import FakeTaskRepository  # noqa: E402


@pytest.fixture
def now():
    """Fixed reference time used across reminder tests."""
    return datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_task():
    """Factory for Task models with sensible defaults."""

    def _make_task(**overrides) -> Task:
        data = {
            "id": str(uuid.uuid4()),
            "title": "Submit report",
            "description": "Quarterly numbers",
            "due_date": None,
            "completed": False,
            "steps": [],
            "recipients": [],
            "reminder_schedule": [],
        }
        data.update(overrides)
        return Task.model_validate(data)

    return _make_task


@pytest.fixture
def task_repo():
    return FakeTaskRepository()


@pytest.fixture
def email_service():
    """Mock email transport that accepts every message."""
    service = AsyncMock()
    service.send.side_effect = lambda to, subject, html: DeliveryResult(
        recipient=to, status_code=202
    )
    return service


@pytest.fixture
def client(task_repo, email_service):
    """TestClient with the store and email transport replaced by fakes."""
    app.dependency_overrides[get_task_repository] = lambda: task_repo
    app.dependency_overrides[get_email_service] = lambda: email_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
