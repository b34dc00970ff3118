"""
Notification sender implementations.

ResendEmailSender delivers through the Resend HTTP API. LoggingEmailSender
is the development fallback used when no Resend key is configured.
"""

import logging
from typing import Optional

import httpx

from shared.config import Settings
from shared.exceptions import DeliveryError
from shared.logging import redact_email

from .interfaces import INotificationSender

logger = logging.getLogger(__name__)


class ResendEmailSender(INotificationSender):
    """Sends email through the Resend REST API."""

    def __init__(
        self,
        api_key: str,
        sender: str,
        api_url: str = "https://api.resend.com/emails",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key
        self._sender = sender
        self._api_url = api_url
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "ResendEmailSender":
        return cls(
            api_key=settings.resend_api_key,
            sender=settings.email_from,
            api_url=settings.resend_api_url,
            timeout=settings.email_timeout_seconds,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def send(self, to: str, subject: str, html: str) -> None:
        """Send an email, raising DeliveryError if Resend doesn't accept it."""
        if not self.is_configured:
            logger.error("Resend API key not configured, cannot send email")
            raise DeliveryError(details={"reason": "not_configured"})

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    self._api_url,
                    headers={
                        "Authorization": f"Bearer {self._api_key}",
                        "Content-Type": "application/json",
                    },
                    json={
                        "from": self._sender,
                        "to": [to],
                        "subject": subject,
                        "html": html,
                    },
                    timeout=self._timeout,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Resend rejected email to {redact_email(to)}: "
                f"{e.response.status_code} {e.response.text[:200]}"
            )
            raise DeliveryError(details={"status_code": e.response.status_code}) from e
        except httpx.HTTPError as e:
            logger.error(f"Email delivery to {redact_email(to)} failed: {e}")
            raise DeliveryError() from e

        logger.info(f"Email sent to {redact_email(to)}")


class LoggingEmailSender(INotificationSender):
    """
    Development sender that logs emails instead of delivering them.

    Only wired in when DEBUG is on and no Resend key is set.
    """

    def __init__(self):
        self.outbox: list[dict[str, str]] = []

    async def send(self, to: str, subject: str, html: str) -> None:
        self.outbox.append({"to": to, "subject": subject, "html": html})
        logger.warning(f"Email not delivered (dev mode): to={to} subject={subject!r}\n{html}")


def build_notification_sender(settings: Settings) -> INotificationSender:
    """Pick the sender implementation for the given settings."""
    if not settings.resend_api_key and settings.debug:
        logger.warning("RESEND_API_KEY not set, emails will be logged instead of sent")
        return LoggingEmailSender()
    return ResendEmailSender.from_settings(settings)
