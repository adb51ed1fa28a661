from typing import Any, Optional

from pydantic import BaseModel


class DownloadResponse(BaseModel):
    success: bool
    videoInfo: Any
    download: Any
    transcript: str = ""
    translatedTranscript: str = ""
    videoId: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[Any] = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str
