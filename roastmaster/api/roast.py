"""
Purpose:
- POST /text   : roast a short text description (vision variant only).
- POST /{any}  : roast the raw request body as an image (plain vision or vision + sound effect).

Both routes check the API key before reading the body, and wrap the rest in try/except
so the API always returns JSON. RoastError subclasses are rendered by the app's handler.
"""

import logging
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..core.errors import RoastError
from ..core.settings import Settings
from ..gemini.client import GeminiAPIError, GeminiClient
from ..services.roaster import (
    ImageInput,
    require_api_key,
    roast,
    text_input_from_body,
)
from ..services.sounds import SoundCatalog
from .schema import ErrorResponse, RoastResponse, SoundRoastResponse, UpstreamErrorResponse

logger = logging.getLogger(__name__)

text_router = APIRouter(tags=["roast"])
image_router = APIRouter(tags=["roast"])

def _settings(request: Request) -> Settings:
    return request.app.state.settings

def _gemini(request: Request) -> GeminiClient:
    return request.app.state.gemini

def _catalog(request: Request) -> SoundCatalog:
    return request.app.state.sound_catalog

def failure_response(exc: Exception) -> JSONResponse:
    logger.exception("Error processing roast: %s", exc)
    body = ErrorResponse(error="Failed to generate roast", details=str(exc))
    return JSONResponse(body.model_dump(), status_code=500)

@text_router.post("/text")
async def roast_text_route(request: Request):
    """
    Body: {"text": "..."}. Upstream failures degrade to a 200 carrying the Gemini status/details.
    """
    settings = _settings(request)
    require_api_key(settings)
    try:
        inp = text_input_from_body(await request.json())
        try:
            result = await roast(_gemini(request), settings, _catalog(request), inp)
        except GeminiAPIError as e:
            body = UpstreamErrorResponse(status=e.status_code, details=e.details)
            return JSONResponse(body.model_dump(), status_code=200)
        return RoastResponse(
            roast_text=result.roast_text,
            sound_effect=result.sound_effect_or_audio_url,
            description=result.description,
        )
    except RoastError:
        raise
    except Exception as e:
        return failure_response(e)

@image_router.post("/{path:path}")
async def roast_image_route(request: Request, path: str):
    """
    Body: raw image bytes (sent to Gemini as image/jpeg).
    """
    settings = _settings(request)
    require_api_key(settings)
    try:
        inp = ImageInput(data=await request.body())
        result = await roast(_gemini(request), settings, _catalog(request), inp)
        if settings.roast_variant == "sound":
            return SoundRoastResponse(roast_text=result.roast_text, audio_file=result.sound_effect_or_audio_url)
        return RoastResponse(
            roast_text=result.roast_text,
            sound_effect=result.sound_effect_or_audio_url,
            description=result.description,
        )
    except RoastError:
        raise
    except Exception as e:
        return failure_response(e)
