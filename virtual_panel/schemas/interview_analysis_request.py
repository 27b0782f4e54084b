"""
Description:
This module defines the schema for an interview transcript analysis request.

Dependencies:
- pydantic: For data validation and settings management.
- virtual_panel.schemas.transcript_entry: For the transcript entries.
"""
from typing import List, Optional

from pydantic import BaseModel

from virtual_panel.schemas.transcript_entry import TranscriptEntry


class InterviewAnalysisRequest(BaseModel):
    transcript: Optional[List[TranscriptEntry]] = None
    role: Optional[str] = None
    name: Optional[str] = None
