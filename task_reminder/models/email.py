from typing import Optional
from pydantic import BaseModel


class EmailMessage(BaseModel):
    """Single-recipient HTML email"""
    to: str
    subject: str
    html: str


class DeliveryResult(BaseModel):
    """Outcome of an accepted send"""
    recipient: str
    status_code: int
    message_id: Optional[str] = None


class SendRemindersResponse(BaseModel):
    """Response from the bulk reminder endpoint"""
    sent: int
