import json
import logging

import requests

from app.config.config import Settings

logger = logging.getLogger(__name__)


def get_video_transcript(video_id: str, settings: Settings) -> str:
    """Best-effort transcript lookup. Returns "" when nothing usable comes back."""
    url = settings.transcript_endpoint

    try:
        response = requests.get(url, params={"videoId": video_id},
                                timeout=settings.request_timeout)
        if response.status_code != 200:
            logger.warning(f"Transcript API error for {video_id}: {response.status_code}")
            return ""

        data = response.json()
        if not isinstance(data, dict) or "responseContext" not in data:
            logger.info(f"No transcript available for {video_id}")
            return ""

        return json.dumps(data["responseContext"], ensure_ascii=False)
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"Transcript request failed for {video_id}: {e}")

    return ""
