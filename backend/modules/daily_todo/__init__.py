"""
Daily todo module.

One free-form text document per user.

Public API:
- IDailyTodoService: Read and overwrite a user's todo
- DailyTodo: The stored document
"""

from .interfaces import IDailyTodoService
from .models import DailyTodo
from .exceptions import DailyTodoNotFoundError, InvalidTodoContentError

__all__ = [
    "IDailyTodoService",
    "DailyTodo",
    "DailyTodoNotFoundError",
    "InvalidTodoContentError",
]
