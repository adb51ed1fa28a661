import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes.download import router as download_router
from app.api.routes.health import router as health_router
from app.config.config import get_settings
from app.pipeline.orchestrator import INVALID_URL_MESSAGE

logging.basicConfig(level=logging.INFO)

app = FastAPI(
    title="YouTube Video Download API",
    description="Resolve YouTube URLs into video info, download streams and translated transcripts",
    version="1.0.0"
)

# --- CORS Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(download_router)
app.include_router(health_router)


# Unparseable download bodies get the same 400 envelope as a bad URL
@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    if request.url.path == "/api/download" and request.method == "POST":
        return JSONResponse(status_code=400, content={"error": INVALID_URL_MESSAGE})
    return await request_validation_exception_handler(request, exc)


@app.get("/")
def root():
    return {"status": "API is running"}


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
