"""
Daily todo module data models.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel


class DailyTodo(BaseModel):
    """A row of the daily_todos table."""

    id: str
    user_id: str
    content: str
    updated_at: datetime


class UpdateDailyTodoRequest(BaseModel):
    # Any JSON value; the service rejects non-strings with a 400
    content: Any = None


class DailyTodoResponse(BaseModel):
    success: bool = True
    content: str
    user: str
    last_modified: datetime


class DailyTodoUpdatedResponse(BaseModel):
    success: bool = True
    message: str = "Daily todo updated successfully"
    last_modified: Optional[datetime] = None
