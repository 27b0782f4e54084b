"""
Description:
This module defines the schema for a question generation request.

`role` is optional at the schema level so a missing role reaches the route and is
reported with the standard failure envelope instead of a schema error.

Dependencies:
- pydantic: For data validation and settings management.
"""
from typing import Optional

from pydantic import BaseModel


class InterviewQuestionsRequest(BaseModel):
    role: Optional[str] = None
    name: Optional[str] = None
