# Unit tests for the reminder matching rules
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from task_reminder.services.reminder_service import days_until_due, is_reminder_due, list_due_tasks
from task_reminder.utils.datetime_helper import days_until


@pytest.mark.unit
class TestDaysUntil:
    """Partial days round up."""

    def test_twelve_hours_ahead_is_one_day(self, now):
        assert days_until(now + timedelta(hours=12), now) == 1

    def test_one_millisecond_past_is_not_positive(self, now):
        assert days_until(now - timedelta(milliseconds=1), now) <= 0
        assert days_until(now - timedelta(milliseconds=1), now) == 0

    def test_exact_days(self, now):
        assert days_until(now + timedelta(days=3), now) == 3
        assert days_until(now, now) == 0

    def test_just_over_a_day_rounds_up(self, now):
        assert days_until(now + timedelta(days=2, microseconds=1), now) == 3

    def test_overdue_days_are_negative(self, now):
        assert days_until(now - timedelta(hours=25), now) == -1
        assert days_until(now - timedelta(days=2), now) == -2

    def test_naive_due_date_is_utc(self, now):
        naive = (now + timedelta(hours=1)).replace(tzinfo=None)
        assert days_until(naive, now) == 1

    def test_other_timezones_compare_by_instant(self, now):
        jst = timezone(timedelta(hours=9))
        assert days_until((now + timedelta(days=2)).astimezone(jst), now) == 2


@pytest.mark.unit
class TestIsReminderDue:
    """Test the reminder decision."""

    def test_matches_scheduled_day(self, make_task, now):
        task = make_task(due_date=now + timedelta(days=3), reminder_schedule=[1, 3, 7])
        assert is_reminder_due(task, now) is True

    def test_unscheduled_day_does_not_match(self, make_task, now):
        task = make_task(due_date=now + timedelta(days=2), reminder_schedule=[1, 3, 7])
        assert is_reminder_due(task, now) is False

    def test_twelve_hours_out_matches_one_day_entry(self, make_task, now):
        task = make_task(due_date=now + timedelta(hours=12), reminder_schedule=[1])
        assert is_reminder_due(task, now) is True

    @pytest.mark.parametrize(
        "offset",
        [timedelta(days=1), timedelta(days=3), timedelta(hours=5), -timedelta(days=4)],
    )
    def test_completed_task_never_matches(self, make_task, now, offset):
        task = make_task(
            due_date=now + offset,
            completed=True,
            reminder_schedule=[0, 1, 2, 3, 4, 5, 6, 7],
        )
        assert is_reminder_due(task, now) is False

    def test_empty_schedule_never_matches(self, make_task, now):
        task = make_task(due_date=now + timedelta(days=1), reminder_schedule=[])
        assert is_reminder_due(task, now) is False

    def test_missing_schedule_does_not_raise(self, now):
        task = SimpleNamespace(completed=False, due_date=now + timedelta(days=1), reminder_schedule=None)
        assert is_reminder_due(task, now) is False

    def test_missing_due_date_does_not_match(self, make_task, now):
        task = make_task(due_date=None, reminder_schedule=[0, 1])
        assert is_reminder_due(task, now) is False
        assert days_until_due(task, now) is None

    def test_invalid_due_date_does_not_match(self, now):
        task = SimpleNamespace(completed=False, due_date="not a date", reminder_schedule=[1])
        assert is_reminder_due(task, now) is False

    def test_overdue_task_is_not_retriggered(self, make_task, now):
        task = make_task(due_date=now - timedelta(days=2), reminder_schedule=[0, 1, 3])
        assert is_reminder_due(task, now) is False

    def test_due_today_matches_zero(self, make_task, now):
        task = make_task(due_date=now - timedelta(hours=3), reminder_schedule=[0])
        assert is_reminder_due(task, now) is True

    def test_deterministic(self, make_task, now):
        task = make_task(due_date=now + timedelta(days=7), reminder_schedule=[7])
        results = {is_reminder_due(task, now) for _ in range(5)}
        assert results == {True}


@pytest.mark.unit
def test_list_due_tasks_keeps_store_order(make_task, now):
    first = make_task(title="b", due_date=now + timedelta(days=1), reminder_schedule=[1])
    skipped = make_task(title="x", due_date=now + timedelta(days=2), reminder_schedule=[1])
    second = make_task(title="a", due_date=now + timedelta(days=7), reminder_schedule=[7])

    due = list_due_tasks([first, skipped, second], now)

    assert [t.title for t in due] == ["b", "a"]
