import logging

import requests

from app.config.config import Settings

logger = logging.getLogger(__name__)

MAX_TRANSCRIPT_CHARS = 3000
TEMPERATURE = 0.7
MAX_TOKENS = 2000


def build_system_prompt(target_language: str) -> str:
    return (
        f"You are a professional translator. Translate the following transcript into "
        f"{target_language}. Preserve the original format and meaning."
    )


def translate_transcript(transcript: str, settings: Settings) -> str:
    """Translate the first MAX_TRANSCRIPT_CHARS of a transcript. Returns "" on any failure."""
    if not transcript:
        return ""

    if not settings.translation_api_key:
        logger.warning("Translation skipped: no API key configured")
        return ""

    headers = {
        "Authorization": f"Bearer {settings.translation_api_key}",
        "Content-Type": "application/json",
    }
    data = {
        "model": settings.translation_model,
        "messages": [
            {"role": "system", "content": build_system_prompt(settings.translation_target_language)},
            {"role": "user", "content": transcript[:MAX_TRANSCRIPT_CHARS]},
        ],
        "temperature": TEMPERATURE,
        "max_tokens": MAX_TOKENS,
    }

    try:
        response = requests.post(settings.translation_api_url, headers=headers, json=data,
                                 timeout=settings.request_timeout)
        response.raise_for_status()
        return response.json()["choices"][0]["message"]["content"] or ""
    except (requests.RequestException, ValueError, KeyError, IndexError, TypeError) as e:
        logger.warning(f"Translation failed: {e}")
        return ""
