"""
Logging setup.

Modules log through the standard library (`logging.getLogger(__name__)`);
this only configures the root handler once per process.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    Safe to call more than once: an already configured root logger only
    gets its level updated.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(level.upper())


def redact_email(email: str) -> str:
    """Redact an email address for logging."""
    if "@" not in email:
        return "redacted"
    local, domain = email.split("@", 1)
    return f"{local[:2]}***@{domain}"
