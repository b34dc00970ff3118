"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = False
    error: str
    message: str


# OpenAPI documentation for the shared error responses
AUTH_ERROR_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Missing, invalid or expired credential"},
}

ADMIN_ERROR_RESPONSES = {
    **AUTH_ERROR_RESPONSES,
    403: {"model": ErrorResponse, "description": "Admin access required"},
}
