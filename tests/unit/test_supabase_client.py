# Unit tests for the Supabase client singleton
from unittest.mock import Mock, patch

import pytest

from task_reminder.config import Settings
from task_reminder.infra.supabase import get_supabase_client, reset_supabase_client


@pytest.fixture(autouse=True)
def fresh_client():
    """Start and finish every test without a cached client."""
    reset_supabase_client()
    yield
    reset_supabase_client()


@pytest.mark.unit
class TestSupabaseClient:

    @patch("task_reminder.infra.supabase.client.create_client")
    @patch("task_reminder.infra.supabase.client.get_settings")
    def test_client_is_created_once(self, mock_settings, mock_create):
        mock_settings.return_value = Settings(
            supabase_url="http://localhost:54321", supabase_service_role_key="key"
        )
        mock_create.return_value = Mock()

        first = get_supabase_client()
        second = get_supabase_client()

        assert first is second
        mock_create.assert_called_once_with("http://localhost:54321", "key")

    @patch("task_reminder.infra.supabase.client.create_client")
    @patch("task_reminder.infra.supabase.client.get_settings")
    def test_reset_creates_new_client(self, mock_settings, mock_create):
        mock_settings.return_value = Settings(
            supabase_url="http://localhost:54321", supabase_service_role_key="key"
        )
        mock_create.side_effect = [Mock(), Mock()]

        first = get_supabase_client()
        reset_supabase_client()
        second = get_supabase_client()

        assert first is not second
        assert mock_create.call_count == 2

    @patch("task_reminder.infra.supabase.client.get_settings")
    def test_missing_credentials(self, mock_settings):
        mock_settings.return_value = Settings()

        with pytest.raises(ValueError):
            get_supabase_client()
