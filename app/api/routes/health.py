from datetime import datetime, timezone

from fastapi import APIRouter

from app.schemas.download_schema import HealthResponse

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health():
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}
