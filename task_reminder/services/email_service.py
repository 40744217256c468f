"""
Email Service

Sends single-recipient HTML emails via the SendGrid v3 Mail Send API
"""

import httpx
import logging
from typing import Optional

from task_reminder.config import Settings
from task_reminder.models.email import DeliveryResult, EmailMessage

logger = logging.getLogger(__name__)

SENDGRID_SEND_URL = "https://api.sendgrid.com/v3/mail/send"


class EmailDeliveryError(Exception):
    """A message was rejected by the API or never reached it"""

    def __init__(self, recipient: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.recipient = recipient
        self.status_code = status_code


class EmailService:
    """Service for sending emails via SendGrid"""

    def __init__(
        self,
        api_key: str,
        from_email: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        self.api_key = api_key
        self.from_email = from_email
        self._transport = transport
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "EmailService":
        return cls(api_key=settings.sendgrid_api_key, from_email=settings.email_from)

    def _build_payload(self, message: EmailMessage) -> dict:
        return {
            "personalizations": [{"to": [{"email": message.to}]}],
            "from": {"email": self.from_email},
            "subject": message.subject,
            "content": [{"type": "text/html", "value": message.html}],
        }

    async def send(self, to: str, subject: str, html: str) -> DeliveryResult:
        """
        Send one email

        Args:
            to: Recipient address
            subject: Subject line
            html: HTML body

        Returns:
            DeliveryResult for an accepted message

        Raises:
            EmailDeliveryError: The API rejected the message or could not be reached
        """
        message = EmailMessage(to=to, subject=subject, html=html)

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    SENDGRID_SEND_URL,
                    json=self._build_payload(message),
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json",
                    },
                    timeout=self._timeout,
                )
        except httpx.HTTPError as e:
            raise EmailDeliveryError(to, f"SendGrid request failed: {e}") from e

        if not response.is_success:
            raise EmailDeliveryError(
                to,
                f"SendGrid API error {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        logger.info(f"Email accepted for {to} (status {response.status_code})")
        return DeliveryResult(
            recipient=to,
            status_code=response.status_code,
            message_id=response.headers.get("X-Message-Id"),
        )
