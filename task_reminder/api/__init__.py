# API module exports
from task_reminder.api import health, reminders, tasks
from task_reminder.api.base import api_router

__all__ = ["health", "reminders", "tasks", "api_router"]
