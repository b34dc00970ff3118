"""
One-time login code service.

A code moves through a single linear state machine: issued, then either
used (by one successful verify) or expired. Nothing returns a used or
expired code to the valid state.
"""

import logging
from datetime import timedelta
from typing import Optional

from shared.config import Settings
from shared.exceptions import DeliveryError, PersistenceError
from shared.logging import redact_email
from shared.models import utc_now
from modules.notifications.interfaces import INotificationSender
from modules.notifications.templates import OTP_SUBJECT, render_otp_email

from .credentials import generate_otp, is_valid_email
from .exceptions import InvalidCredentialError, InvalidEmailError, MissingFieldError
from .interfaces import IOTPService
from .repository import OTPRepository

logger = logging.getLogger(__name__)


class OTPService(IOTPService):
    """Issues and verifies one-time login codes."""

    def __init__(
        self,
        repository: OTPRepository,
        notifier: INotificationSender,
        settings: Settings,
    ):
        self._repo = repository
        self._notifier = notifier
        self._ttl = timedelta(minutes=settings.otp_ttl_minutes)
        self._discard_on_delivery_failure = settings.otp_discard_on_delivery_failure

    async def issue(self, email: Optional[str]) -> None:
        if not is_valid_email(email):
            raise InvalidEmailError()

        code = generate_otp()
        otp = self._repo.create(email, code, utc_now() + self._ttl)

        html = render_otp_email(code, int(self._ttl.total_seconds() // 60))
        try:
            await self._notifier.send(email, OTP_SUBJECT, html)
        except DeliveryError:
            if self._discard_on_delivery_failure:
                self._discard(otp.id)
            raise

        logger.info(f"Issued login code for {redact_email(email)}")

    async def verify(self, email: Optional[str], code: Optional[str]) -> str:
        if not email or not code:
            raise MissingFieldError(
                "Email and code are required",
                fields=[name for name, value in (("email", email), ("code", code)) if not value],
            )

        otp = self._repo.find_valid(email, code, utc_now())
        if otp is None:
            raise InvalidCredentialError("Invalid or expired code")

        # Conditional update: a concurrent verify of the same code loses here
        if not self._repo.mark_used(otp.id):
            raise InvalidCredentialError("Invalid or expired code")

        return otp.email

    def _discard(self, otp_id: str) -> None:
        try:
            self._repo.mark_used(otp_id)
        except PersistenceError:
            logger.warning(f"Could not discard undelivered login code {otp_id}")
