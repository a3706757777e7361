"""
Configuration for the Gemini explanation backend.
Values come from the environment (a .env file is picked up if present).
"""

import logging
import os
from typing import Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv, find_dotenv

# Load .env file (walks up directories to find it)
load_dotenv(find_dotenv())

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT_SECONDS = 30.0


class GeminiSettings(BaseModel):
    """Connection settings for the Gemini generateContent API."""

    api_key: str = Field(
        default="",
        description="Gemini API key; an empty key still attempts the call"
    )

    model: str = Field(
        default=DEFAULT_GEMINI_MODEL,
        description="Model identifier sent in the request path"
    )

    api_base: str = Field(
        default=DEFAULT_GEMINI_API_BASE,
        description="Base URL of the Generative Language API"
    )

    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0.0,
        description="HTTP timeout for a single generateContent call"
    )


def _timeout_from_env() -> float:
    raw = os.environ.get("GEMINI_TIMEOUT_SECONDS")
    if raw is None:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if value <= 0.0:
        logger.warning(
            "Ignoring invalid GEMINI_TIMEOUT_SECONDS=%r, using %.1f", raw, DEFAULT_TIMEOUT_SECONDS
        )
        return DEFAULT_TIMEOUT_SECONDS
    return value


def settings_from_env() -> GeminiSettings:
    """Build settings from GEMINI_* environment variables."""
    return GeminiSettings(
        api_key=os.environ.get("GEMINI_API_KEY", ""),
        model=os.environ.get("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        api_base=os.environ.get("GEMINI_API_BASE", DEFAULT_GEMINI_API_BASE),
        timeout_seconds=_timeout_from_env(),
    )


# Global settings instance, built on first use
_settings: Optional[GeminiSettings] = None


def get_settings() -> GeminiSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = settings_from_env()
    return _settings


def update_settings(**kwargs) -> GeminiSettings:
    """Update settings fields (e.g. model, timeout_seconds)."""
    global _settings
    current_dict = get_settings().model_dump()
    current_dict.update(kwargs)
    _settings = GeminiSettings(**current_dict)
    return _settings


def reload_settings() -> GeminiSettings:
    """Re-read settings from the environment."""
    global _settings
    _settings = settings_from_env()
    return _settings
