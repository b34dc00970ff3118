"""
Daily todo module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class DailyTodoNotFoundError(NotFoundError):
    """Raised when a user has never written a daily todo."""

    def __init__(self, user_id: str):
        super().__init__(
            "No daily todo found. Please create one first.",
            code="DAILY_TODO_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidTodoContentError(ValidationError):
    """Raised when todo content is missing, empty or not a string."""

    def __init__(self):
        super().__init__("Content is required", code="INVALID_CONTENT")
