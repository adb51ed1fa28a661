import logging
from typing import Any, Dict, Type

import requests

from app.config.config import Settings
from app.services.exceptions import DownloadLinksError, MetadataError, UpstreamError

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "success"

METADATA_ERROR_MESSAGE = "Eroare la obținerea informațiilor video"
DOWNLOAD_ERROR_MESSAGE = "Eroare la obținerea link-urilor de download"
SEARCH_ERROR_MESSAGE = "Eroare la căutare"
TRENDING_ERROR_MESSAGE = "Eroare la obținerea videoclipurilor trending"
RESOLVE_ERROR_MESSAGE = "Eroare la rezolvarea URL-ului"


def _response_details(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class RapidAPIClient:
    """Client for the YouTube video and shorts downloader API on RapidAPI."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.base_url = settings.rapidapi_base_url
        self.headers = {
            "x-rapidapi-key": settings.rapidapi_key,
            "x-rapidapi-host": settings.rapidapi_host,
        }

    def _get(self, path: str, params: Dict[str, Any], message: str,
             error_cls: Type[UpstreamError] = UpstreamError) -> Any:
        url = f"{self.base_url}/{path}"
        try:
            response = requests.get(url, headers=self.headers, params=params,
                                    timeout=self.settings.request_timeout)
        except requests.RequestException as e:
            logger.error(f"{message}: {e}")
            raise error_cls(message, details=str(e)) from e

        if not response.ok:
            details = _response_details(response)
            logger.error(f"{message}: HTTP {response.status_code} from {path}")
            raise error_cls(message, details=details)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{message}: invalid JSON from {path}")
            raise error_cls(message, details=response.text) from e

    def _get_checked(self, path: str, params: Dict[str, Any], message: str,
                     error_cls: Type[UpstreamError]) -> Dict[str, Any]:
        data = self._get(path, params, message, error_cls)
        if not isinstance(data, dict) or data.get("status") != SUCCESS_STATUS:
            logger.error(f"{message}: unexpected status from {path}")
            raise error_cls(message, details=data)
        return data

    def get_video_info(self, video_id: str) -> Dict[str, Any]:
        params = {
            "id": video_id,
            "lang": self.settings.rapidapi_lang,
            "geo": self.settings.rapidapi_geo,
        }
        return self._get_checked("video.php", params, METADATA_ERROR_MESSAGE, MetadataError)

    def get_download_links(self, video_id: str) -> Dict[str, Any]:
        return self._get_checked("download.php", {"id": video_id}, DOWNLOAD_ERROR_MESSAGE,
                                 DownloadLinksError)

    # Raw pass-through calls, no status check

    def fetch_video_info(self, video_id: str) -> Any:
        params = {
            "id": video_id,
            "lang": self.settings.rapidapi_lang,
            "geo": self.settings.rapidapi_geo,
        }
        return self._get("video.php", params, METADATA_ERROR_MESSAGE, MetadataError)

    def fetch_download_links(self, video_id: str) -> Any:
        return self._get("download.php", {"id": video_id}, DOWNLOAD_ERROR_MESSAGE,
                         DownloadLinksError)

    def search(self, query: str, order: str = "relevance", type: str = "video") -> Any:
        params = {
            "query": query,
            "order": order,
            "type": type,
            "lang": self.settings.rapidapi_lang,
            "geo": self.settings.rapidapi_geo,
        }
        return self._get("search.php", params, SEARCH_ERROR_MESSAGE)

    def trending(self, type: str = "now") -> Any:
        params = {
            "type": type,
            "lang": self.settings.rapidapi_lang,
            "geo": self.settings.rapidapi_geo,
        }
        return self._get("trending.php", params, TRENDING_ERROR_MESSAGE)

    def resolve(self, url: str) -> Any:
        return self._get("resolve.php", {"url": url}, RESOLVE_ERROR_MESSAGE)
