"""
Purpose:
- Pydantic models for roast responses so the API is self-documenting and stable.
"""

from __future__ import annotations
from pydantic import BaseModel, Field
from typing import Optional

class RoastResponse(BaseModel):
    roast_text: str
    sound_effect: Optional[str] = None
    description: Optional[str] = None

class SoundRoastResponse(BaseModel):
    roast_text: str
    audio_file: str = Field(..., description="Absolute URL of the matched sound effect")

class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None

class UpstreamErrorResponse(BaseModel):
    # Text mode answers 200 with this body instead of failing hard
    error: str = "Gemini API error"
    status: int
    details: str
    note: str = "Check your API key or quota. Also ensure model name and API version are correct."
