"""
Notifications module.

Delivers transactional email (login codes) through Resend.

Public API:
- INotificationSender: Interface for sending email
- ResendEmailSender / LoggingEmailSender: Implementations
- build_notification_sender: Pick an implementation from settings
"""

from .interfaces import INotificationSender
from .service import ResendEmailSender, LoggingEmailSender, build_notification_sender
from .templates import OTP_SUBJECT, render_otp_email

__all__ = [
    "INotificationSender",
    "ResendEmailSender",
    "LoggingEmailSender",
    "build_notification_sender",
    "OTP_SUBJECT",
    "render_otp_email",
]
