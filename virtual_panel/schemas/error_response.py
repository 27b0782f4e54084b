"""
Description:
Failure envelope returned by every error handler.

Dependencies:
- pydantic: For data validation and settings management.
"""
from typing import Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: Optional[str] = None
