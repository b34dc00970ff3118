"""
Notifications module interface.

The auth module depends on INotificationSender to deliver login codes
without knowing which email provider is behind it.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class INotificationSender(Protocol):
    """Interface for delivering a formatted email."""

    async def send(self, to: str, subject: str, html: str) -> None:
        """
        Deliver one email.

        Args:
            to: Recipient address
            subject: Subject line
            html: HTML body

        Raises:
            DeliveryError: If the provider did not accept the message
        """
        ...
