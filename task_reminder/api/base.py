from fastapi import APIRouter
from task_reminder.api import health, reminders, tasks

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(health.router)
api_router.include_router(tasks.router)
api_router.include_router(reminders.router)
