import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from app.config.config import Settings, get_settings
from app.pipeline.orchestrator import DownloadPipeline
from app.schemas.download_schema import DownloadResponse, ErrorResponse
from app.services.exceptions import ServiceError
from app.services.rapidapi_service import RapidAPIClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Download"])

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def get_rapidapi_client(settings: Settings = Depends(get_settings)) -> RapidAPIClient:
    return RapidAPIClient(settings)


def get_pipeline(settings: Settings = Depends(get_settings)) -> DownloadPipeline:
    return DownloadPipeline(settings)


def error_response(error: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def missing_param(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


@router.post("/download", response_model=DownloadResponse, responses=ERROR_RESPONSES)
def download_video(
    payload: Any = Body(None, examples=[{"url": "https://youtu.be/dQw4w9WgXcQ"}]),
    pipeline: DownloadPipeline = Depends(get_pipeline),
):
    try:
        url = payload.get("url") if isinstance(payload, dict) else None
        return JSONResponse(status_code=200, content=pipeline.run(url))
    except ServiceError as e:
        return error_response(e)
    except Exception as e:
        logger.exception("Unexpected error while processing download request")
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.get("/video-info")
def video_info(id: Optional[str] = None, client: RapidAPIClient = Depends(get_rapidapi_client)):
    if not id:
        return missing_param("Video ID este necesar")
    try:
        return client.fetch_video_info(id)
    except ServiceError as e:
        return error_response(e)


@router.get("/download")
def download_streams(id: Optional[str] = None, client: RapidAPIClient = Depends(get_rapidapi_client)):
    if not id:
        return missing_param("Video ID este necesar")
    try:
        return client.fetch_download_links(id)
    except ServiceError as e:
        return error_response(e)


@router.get("/search")
def search_videos(
    query: Optional[str] = None,
    order: str = "relevance",
    type: str = "video",
    client: RapidAPIClient = Depends(get_rapidapi_client),
):
    if not query:
        return missing_param("Query-ul de căutare este necesar")
    try:
        return client.search(query, order=order, type=type)
    except ServiceError as e:
        return error_response(e)


@router.get("/trending")
def trending_videos(type: str = "now", client: RapidAPIClient = Depends(get_rapidapi_client)):
    try:
        return client.trending(type=type)
    except ServiceError as e:
        return error_response(e)


@router.get("/resolve")
def resolve_url(url: Optional[str] = None, client: RapidAPIClient = Depends(get_rapidapi_client)):
    if not url:
        return missing_param("URL-ul este necesar")
    try:
        return client.resolve(url)
    except ServiceError as e:
        return error_response(e)
