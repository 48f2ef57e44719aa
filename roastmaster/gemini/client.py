"""
Purpose:
- Thin async client for the Gemini generateContent REST endpoint.
- Builds the role/parts request envelope (text prompt + optional inline image).
- Pulls the first candidate's first text part out of the nested response.

Notes:
- The API key travels as the `key` query parameter.
- One POST per call. Non-2xx answers raise GeminiAPIError; callers decide how to degrade.
"""

from __future__ import annotations
import base64
import logging
from typing import Any, Dict, List, Optional
import httpx

logger = logging.getLogger(__name__)


class GeminiAPIError(Exception):
    """Gemini answered with a non-success HTTP status."""

    def __init__(self, status_code: int, details: str):
        super().__init__(f"{status_code} - {details}")
        self.status_code = status_code
        self.details = details


def build_contents(prompt: str, image: Optional[bytes] = None, mime_type: str = "image/jpeg") -> Dict[str, Any]:
    parts: List[Dict[str, Any]] = [{"text": prompt}]
    if image is not None:
        parts.append({
            "inline_data": {
                "mime_type": mime_type,
                "data": base64.b64encode(image).decode("ascii"),
            }
        })
    return {"contents": [{"role": "user", "parts": parts}]}


def extract_text(data: Any) -> Optional[str]:
    """
    candidates[0].content.parts[0].text, or None when any level is missing/empty.
    """
    if not isinstance(data, dict):
        return None
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        return None
    content = candidates[0].get("content")
    if not isinstance(content, dict):
        return None
    parts = content.get("parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    if not isinstance(text, str) or not text:
        return None
    return text


class GeminiClient:
    def __init__(self, http: httpx.AsyncClient, api_base: str, model: str):
        self.http = http
        self.endpoint = f"{api_base.rstrip('/')}/models/{model}:generateContent"

    async def generate(
        self,
        api_key: str,
        prompt: str,
        image: Optional[bytes] = None,
        mime_type: str = "image/jpeg",
    ) -> Optional[str]:
        """
        Send one prompt (optionally with an image) and return the candidate text, if any.
        """
        resp = await self.http.post(
            self.endpoint,
            params={"key": api_key},
            json=build_contents(prompt, image, mime_type),
        )
        if not resp.is_success:
            logger.error("Gemini API error %s: %s", resp.status_code, resp.text)
            raise GeminiAPIError(resp.status_code, resp.text)
        return extract_text(resp.json())
