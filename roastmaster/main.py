"""
Purpose:
- FastAPI application factory and router mounts.
- Attaches permissive CORS headers to every response and answers preflight/other methods itself.
- Uvicorn will serve this on 0.0.0.0:8000 by default.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from .core.errors import RoastError
from .core.settings import Settings, settings as default_settings
from .gemini.client import GeminiClient
from .services.sounds import load_catalog
from .api.roast import image_router, text_router

logger = logging.getLogger(__name__)

def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    settings/transport overrides are for tests (e.g. httpx.MockTransport in place of Gemini).
    """
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs at INFO, and the Gemini key rides in the query string
    logging.getLogger("httpx").setLevel(logging.WARNING)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with httpx.AsyncClient(timeout=settings.gemini_timeout_s, transport=transport) as http:
            app.state.gemini = GeminiClient(http, settings.gemini_api_base, settings.gemini_model)
            yield

    app = FastAPI(title="Roast Master API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    # Loaded once; read-only for the process lifetime
    app.state.sound_catalog = load_catalog(settings.sound_catalog_file, settings.default_sound)

    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; roast requests will answer 500")

    @app.middleware("http")
    async def cors_and_methods(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        elif request.method != "POST":
            response = PlainTextResponse("Method not allowed", status_code=405)
        else:
            response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = settings.cors_allow_origin
        response.headers["Access-Control-Allow-Methods"] = settings.cors_allow_methods
        response.headers["Access-Control-Allow-Headers"] = settings.cors_allow_headers
        return response

    @app.exception_handler(RoastError)
    async def roast_error_handler(request: Request, exc: RoastError):
        return JSONResponse(exc.payload(), status_code=exc.status_code)

    # /text must be mounted before the catch-all image route
    if settings.roast_variant == "vision":
        app.include_router(text_router)
    app.include_router(image_router)
    return app

def run():
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)

app = create_app()
