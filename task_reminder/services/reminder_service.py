"""
Reminder Service

Handles:
- Deciding whether today is a reminder day for a task
- Listing tasks whose reminder is due
- Sending reminder emails to every recipient of every due task
"""

import logging
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from task_reminder.infra.supabase.repositories.tasks import TaskRepository
from task_reminder.models.task import Task
from task_reminder.services.email_service import EmailService
from task_reminder.services.reminder_email import build_subject, render_reminder_html
from task_reminder.utils.datetime_helper import days_until, utc_now

logger = logging.getLogger(__name__)


def days_until_due(task: Task, now: datetime) -> Optional[int]:
    """Whole days left before the task's due date, None when it has no usable due date"""
    due_date = getattr(task, "due_date", None)
    if not isinstance(due_date, datetime):
        return None
    return days_until(due_date, now)


def is_reminder_due(task: Task, now: datetime) -> bool:
    """
    True when the task is incomplete and the number of days left before
    its due date is one of its reminder_schedule entries.

    Exact membership only: an overdue task matches only if its negative day
    count is listed. A missing schedule or due date never matches.
    """
    if getattr(task, "completed", False):
        return False

    schedule = getattr(task, "reminder_schedule", None) or []
    if not schedule:
        return False

    days_left = days_until_due(task, now)
    if days_left is None:
        return False

    return days_left in schedule


def list_due_tasks(tasks: Iterable[Task], now: datetime) -> List[Task]:
    """Filter tasks through is_reminder_due, keeping their order"""
    return [task for task in tasks if is_reminder_due(task, now)]


class ReminderService:
    """Service for finding due reminders and sending them"""

    def __init__(
        self,
        task_repo: TaskRepository,
        email_service: EmailService,
        app_base_url: str,
        window_days: int = 30,
    ):
        self.task_repo = task_repo
        self.email_service = email_service
        self.app_base_url = app_base_url
        self.window_days = window_days

    async def get_upcoming(self, now: Optional[datetime] = None) -> List[Task]:
        """
        Get incomplete tasks whose reminder falls on today.

        Args:
            now: Reference time (defaults to current UTC time)

        Returns:
            Matching tasks in store order
        """
        now = now or utc_now()
        tasks = await self.task_repo.find_incomplete()
        return list_due_tasks(tasks, now)

    async def send_due_reminders(self, now: Optional[datetime] = None) -> int:
        """
        Email every recipient of every task whose reminder is due.

        Only incomplete tasks due within the next window_days are considered.
        Each send is independent: a failing recipient is logged and skipped.

        Args:
            now: Reference time (defaults to current UTC time)

        Returns:
            Number of emails accepted by the transport
        """
        now = now or utc_now()
        candidates = await self.task_repo.find_incomplete_due_between(
            now, now + timedelta(days=self.window_days)
        )
        due_tasks = list_due_tasks(candidates, now)

        sent = 0
        failed = 0
        for task in due_tasks:
            days_left = days_until_due(task, now)
            subject = build_subject(task, days_left)
            html = render_reminder_html(task, days_left, self.app_base_url)

            for recipient in task.recipients:
                try:
                    await self.email_service.send(recipient, subject, html)
                    sent += 1
                except Exception as e:
                    failed += 1
                    logger.error(f"Failed to send reminder for task {task.id} to {recipient}: {e}")

        logger.info(
            f"Reminder run finished: {sent} sent, {failed} failed, "
            f"{len(due_tasks)} due of {len(candidates)} candidate tasks"
        )
        return sent
