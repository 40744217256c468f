"""Services module"""

from task_reminder.services.email_service import EmailService, EmailDeliveryError
from task_reminder.services.exceptions import InvalidStatusError, StepNotFoundError, TaskNotFoundError
from task_reminder.services.reminder_service import (
    ReminderService,
    days_until_due,
    is_reminder_due,
    list_due_tasks,
)
from task_reminder.services.task_service import TaskService

__all__ = [
    "EmailService",
    "EmailDeliveryError",
    "InvalidStatusError",
    "StepNotFoundError",
    "TaskNotFoundError",
    "ReminderService",
    "days_until_due",
    "is_reminder_due",
    "list_due_tasks",
    "TaskService",
]
