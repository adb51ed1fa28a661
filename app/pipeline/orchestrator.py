"""
Request pipeline for POST /api/download.

The steps run strictly in order, each one receiving the validated output of
the previous step:

    validate url -> extract id -> video info -> download streams
        -> transcript (optional) -> translation (optional) -> envelope

Client input errors and upstream failures are raised as ServiceError
subclasses and terminate the pipeline. The transcript and translation steps
never raise; a failure there only leaves the corresponding field empty.
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from app.config.config import Settings
from app.services.exceptions import InvalidRequestError
from app.services.rapidapi_service import RapidAPIClient
from app.services.translation_service import translate_transcript
from app.services.youtube_service import get_video_transcript
from app.utils.video_id import extract_video_id

logger = logging.getLogger(__name__)

URL_REQUIRED_MESSAGE = "URL-ul este necesar"
INVALID_URL_MESSAGE = "URL invalid"

TranscriptFetcher = Callable[[str, Settings], str]
Translator = Callable[[str, Settings], str]


class DownloadPipeline:
    def __init__(
        self,
        settings: Settings,
        client: Optional[RapidAPIClient] = None,
        transcript_fetcher: TranscriptFetcher = get_video_transcript,
        translator: Translator = translate_transcript,
    ):
        self.settings = settings
        self.client = client or RapidAPIClient(settings)
        self.transcript_fetcher = transcript_fetcher
        self.translator = translator

    def validate_url(self, url: Any) -> str:
        if not url:
            raise InvalidRequestError(URL_REQUIRED_MESSAGE)
        if not isinstance(url, str):
            raise InvalidRequestError(INVALID_URL_MESSAGE)
        return url

    def resolve_video_id(self, url: str) -> str:
        video_id = extract_video_id(url)
        if not video_id:
            raise InvalidRequestError(INVALID_URL_MESSAGE)
        return video_id

    def fetch_transcripts(self, video_id: str) -> Tuple[str, str]:
        """Transcript and its translation, both "" when unavailable."""
        try:
            transcript = self.transcript_fetcher(video_id, self.settings) or ""
            translated = ""
            if transcript:
                translated = self.translator(transcript, self.settings) or ""
            return transcript, translated
        except Exception as e:
            logger.warning(f"Transcript step failed for {video_id}: {e}")
            return "", ""

    def run(self, url: Any) -> Dict[str, Any]:
        url = self.validate_url(url)
        video_id = self.resolve_video_id(url)
        logger.info(f"Processing video {video_id}")

        video_info = self.client.get_video_info(video_id)
        download = self.client.get_download_links(video_id)
        transcript, translated = self.fetch_transcripts(video_id)

        logger.info(f"Video {video_id} processed (transcript: {bool(transcript)}, "
                    f"translation: {bool(translated)})")
        return {
            "success": True,
            "videoInfo": video_info,
            "download": download,
            "transcript": transcript,
            "translatedTranscript": translated,
            "videoId": video_id,
        }
