import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel

logger = logging.getLogger(__name__)

if load_dotenv():
    logger.info("Local .env detected and loaded")

DEFAULT_RAPIDAPI_HOST = "youtube-video-and-shorts-downloader.p.rapidapi.com"
DEFAULT_TRANSLATION_API_URL = "https://api.openai.com/v1/chat/completions"


def get_env_var(key, default=""):
    """Helper to get a key, strip quotes/spaces, and handle defaults."""
    val = (os.getenv(key) or "").strip().strip("'").strip('"')
    return val or default


class Settings(BaseModel):
    rapidapi_key: str = ""
    rapidapi_host: str = DEFAULT_RAPIDAPI_HOST
    rapidapi_lang: str = "ro"
    rapidapi_geo: str = "RO"
    transcript_url: str = ""
    translation_api_key: str = ""
    translation_api_url: str = DEFAULT_TRANSLATION_API_URL
    translation_model: str = "gpt-3.5-turbo"
    translation_target_language: str = "Romanian"
    request_timeout: float = 30.0
    port: int = 3000

    @property
    def rapidapi_base_url(self) -> str:
        return f"https://{self.rapidapi_host}"

    @property
    def transcript_endpoint(self) -> str:
        return self.transcript_url or f"{self.rapidapi_base_url}/get_transcript"


def load_settings() -> Settings:
    """Build the settings from the process environment."""
    settings = Settings(
        rapidapi_key=get_env_var("RAPIDAPI_KEY"),
        rapidapi_host=get_env_var("RAPIDAPI_HOST", DEFAULT_RAPIDAPI_HOST),
        rapidapi_lang=get_env_var("RAPIDAPI_LANG", "ro"),
        rapidapi_geo=get_env_var("RAPIDAPI_GEO", "RO"),
        transcript_url=get_env_var("TRANSCRIPT_API_URL"),
        translation_api_key=get_env_var("OPENAI_API_KEY"),
        translation_api_url=get_env_var("TRANSLATION_API_URL", DEFAULT_TRANSLATION_API_URL),
        translation_model=get_env_var("TRANSLATION_MODEL", "gpt-3.5-turbo"),
        translation_target_language=get_env_var("TRANSLATION_TARGET_LANGUAGE", "Romanian"),
        request_timeout=float(get_env_var("REQUEST_TIMEOUT", "30")),
        port=int(get_env_var("PORT", "3000")),
    )

    # Safe logging (only first characters)
    if settings.rapidapi_key:
        logger.info(f"RapidAPI key active: {settings.rapidapi_key[:6]}...")
    else:
        logger.error("RAPIDAPI_KEY is missing! Metadata and download requests will fail.")
    if not settings.translation_api_key:
        logger.warning("OPENAI_API_KEY is not set, transcripts will not be translated")
    return settings


@lru_cache
def get_settings() -> Settings:
    return load_settings()
