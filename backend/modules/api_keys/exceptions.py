"""
API key module exceptions.
"""

from shared.exceptions import ValidationError


class InvalidKeyNameError(ValidationError):
    """Raised when a key name is missing, blank or not a string."""

    def __init__(self):
        super().__init__("Key name is required", code="INVALID_KEY_NAME")
