"""Dependency providers for the API routers"""

from fastapi import Depends

from task_reminder.config import Settings, get_settings
from task_reminder.infra.supabase import get_supabase_client
from task_reminder.infra.supabase.repositories import RepositoryFactory
from task_reminder.infra.supabase.repositories.tasks import TaskRepository
from task_reminder.services.email_service import EmailService
from task_reminder.services.reminder_service import ReminderService
from task_reminder.services.task_service import TaskService


def get_task_repository() -> TaskRepository:
    return RepositoryFactory(get_supabase_client()).tasks


def get_email_service(settings: Settings = Depends(get_settings)) -> EmailService:
    return EmailService.from_settings(settings)


def get_task_service(task_repo: TaskRepository = Depends(get_task_repository)) -> TaskService:
    return TaskService(task_repo)


def get_reminder_service(
    task_repo: TaskRepository = Depends(get_task_repository),
    email_service: EmailService = Depends(get_email_service),
    settings: Settings = Depends(get_settings),
) -> ReminderService:
    return ReminderService(
        task_repo,
        email_service,
        app_base_url=settings.app_base_url,
        window_days=settings.reminder_window_days,
    )
