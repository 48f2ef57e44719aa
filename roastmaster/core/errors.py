"""
Purpose:
- Error kinds the roast handlers raise before or instead of calling Gemini.
- Each carries its HTTP status and the JSON body the client sees.
"""

from __future__ import annotations
from typing import Any, Dict


class RoastError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class ConfigurationMissing(RoastError):
    """Required credential is not set; reported before any network call."""
    status_code = 500


class InvalidInput(RoastError):
    status_code = 400


class UpstreamFailure(Exception):
    """Gemini failed on an image roast; left for the outer boundary to turn into a 500."""
