"""
Purpose:
- The roast "service": request -> prompt -> Gemini -> parse -> fallback.
- One coroutine per mode: text, vision, vision + sound effect.

Design:
- No retries. Text mode lets GeminiAPIError escape so the route can answer a degraded 200;
  image modes convert it into UpstreamFailure for the outer 500 boundary.
- Missing/empty candidate text never fails a request; each mode has its own canned answer.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Any, Optional, Union

from ..core.errors import ConfigurationMissing, InvalidInput, UpstreamFailure
from ..core.settings import Settings
from ..gemini.client import GeminiAPIError, GeminiClient
from .prompts import (
    DEFAULT_DESCRIPTION,
    VISION_FALLBACK,
    VISION_PROMPT,
    fallback_roast,
    sound_fallback,
    sound_prompt,
    text_prompt,
)
from .sounds import SoundCatalog, pick_sound, sound_url

logger = logging.getLogger(__name__)

VISION_DESCRIPTION = "Image analyzed by Gemini Vision"

# --- Request / result types -------------------------------------------------

@dataclass
class TextInput:
    description: str

@dataclass
class ImageInput:
    data: bytes

RoastRequest = Union[TextInput, ImageInput]

@dataclass
class RoastResult:
    roast_text: str
    sound_effect_or_audio_url: Optional[str] = None
    description: Optional[str] = None

# --- Helpers -----------------------------------------------------------------

def require_api_key(settings: Settings) -> str:
    if not settings.gemini_api_key:
        raise ConfigurationMissing("GEMINI_API_KEY not configured. Please set it as a secret.")
    return settings.gemini_api_key

def text_input_from_body(body: Any) -> TextInput:
    """{"text": "..."} -> TextInput; absent/empty/non-string text becomes the default."""
    text = body.get("text") if isinstance(body, dict) else None
    if not isinstance(text, str) or not text:
        text = DEFAULT_DESCRIPTION
    return TextInput(description=text)

def _require_image(inp: ImageInput) -> bytes:
    if not inp.data:
        raise InvalidInput("No image data provided")
    return inp.data

async def _generate_image_text(gemini: GeminiClient, settings: Settings, prompt: str, image: bytes) -> Optional[str]:
    try:
        return await gemini.generate(
            require_api_key(settings), prompt, image=image, mime_type=settings.image_mime_type
        )
    except GeminiAPIError as e:
        raise UpstreamFailure(f"Gemini Vision API failed: {e.status_code} - {e.details}") from e

# --- Modes -------------------------------------------------------------------

async def roast_text(
    gemini: GeminiClient,
    settings: Settings,
    inp: TextInput,
    rng: Optional[random.Random] = None,
) -> RoastResult:
    text = await gemini.generate(require_api_key(settings), text_prompt(inp.description))
    if not text:
        logger.warning("Gemini returned no text for text roast; using canned roast")
        text = fallback_roast(inp.description, rng)
    return RoastResult(roast_text=text, sound_effect_or_audio_url=None, description=inp.description)

async def roast_image(gemini: GeminiClient, settings: Settings, inp: ImageInput) -> RoastResult:
    image = _require_image(inp)
    text = await _generate_image_text(gemini, settings, VISION_PROMPT, image)
    if not text:
        logger.warning("Gemini returned no text for vision roast; using default")
        text = VISION_FALLBACK
    return RoastResult(roast_text=text, sound_effect_or_audio_url=None, description=VISION_DESCRIPTION)

async def roast_image_with_sound(
    gemini: GeminiClient,
    settings: Settings,
    catalog: SoundCatalog,
    inp: ImageInput,
) -> RoastResult:
    image = _require_image(inp)
    text = await _generate_image_text(gemini, settings, sound_prompt(catalog.render()), image)
    if not text:
        logger.warning("Gemini returned no text for sound roast; using default")
        text = sound_fallback(catalog.default)
    roast_line, sound = pick_sound(text, catalog)
    if not roast_line:
        logger.warning("Gemini returned no roast text for sound roast; using default")
        roast_line = VISION_FALLBACK
    return RoastResult(
        roast_text=roast_line,
        sound_effect_or_audio_url=sound_url(settings.sound_asset_base_url, sound),
    )

async def roast(
    gemini: GeminiClient,
    settings: Settings,
    catalog: SoundCatalog,
    req: RoastRequest,
) -> RoastResult:
    """Dispatch on input kind, then on the deployment variant for images."""
    if isinstance(req, TextInput):
        return await roast_text(gemini, settings, req)
    if settings.roast_variant == "sound":
        return await roast_image_with_sound(gemini, settings, catalog, req)
    return await roast_image(gemini, settings, req)
