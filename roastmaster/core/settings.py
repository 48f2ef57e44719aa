"""
Purpose:
- Centralized configuration using pydantic-settings.
- Reads from environment variables and optional .env file.
- Keeps the Gemini model, deployment variant and sound catalog tunable without code changes.
"""

from typing import Literal, Optional
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_SOUND_CATALOG = Path(__file__).resolve().parent.parent / "data" / "sound_effects.json"

class Settings(BaseSettings):
    # Pydantic v2 config (env file + ignore unexpected env vars)
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API host/port
    host: str = Field(default="0.0.0.0", description="Bind address for FastAPI/Uvicorn")
    port: int = Field(default=8000, description="Port for FastAPI/Uvicorn")
    log_level: str = Field(default="INFO", description="Root log level")

    # CORS (applied to every response, errors included)
    cors_allow_origin: str = Field(default="*")
    cors_allow_methods: str = Field(default="GET, POST, OPTIONS")
    cors_allow_headers: str = Field(default="Content-Type")

    # ---- Gemini ----
    # GEMINI_API_KEY is required for roasting; absence is reported per request, not at startup.
    gemini_api_key: Optional[str] = None
    gemini_api_base: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    gemini_model: str = Field(default="gemini-2.5-flash")
    gemini_timeout_s: float = Field(default=60.0, description="Outbound request timeout (seconds)")
    image_mime_type: str = Field(default="image/jpeg", description="MIME type sent with inline image data")

    # "vision": /text + plain image roasts. "sound": every path is an image roast with a sound effect.
    roast_variant: Literal["vision", "sound"] = Field(default="vision")

    # ---- Sound effects ----
    sound_catalog_file: Path = Field(default=BUNDLED_SOUND_CATALOG)
    default_sound: str = Field(default="Rimshot.mp3")
    sound_asset_base_url: str = Field(
        default="https://pub-roastmaster-sfx.r2.dev",
        description="Public bucket serving the audio files",
    )

settings = Settings()
