"""
Reminder API Endpoints

Triggered by an external scheduler to send the day's reminder emails
"""

import logging
from fastapi import APIRouter, Depends, HTTPException

from task_reminder.api.deps import get_reminder_service
from task_reminder.models.email import SendRemindersResponse
from task_reminder.services.reminder_service import ReminderService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reminders", tags=["reminders"])


@router.post("/send", response_model=SendRemindersResponse)
async def send_reminders(service: ReminderService = Depends(get_reminder_service)):
    """
    Send reminder emails for every task whose reminder is due today.

    Returns:
        Number of emails sent successfully
    """
    try:
        sent = await service.send_due_reminders()
    except Exception:
        logger.exception("Reminder run failed")
        raise HTTPException(status_code=500, detail="Failed to send reminders")

    return {"sent": sent}
