from dotenv import load_dotenv

# Config reads the environment at import time
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1 import router as v1_router
from app.config import config
from app.errors import StylerError
from app.schemas import HealthResponse
from app.utils.logging import get_logger

logger = get_logger()

app = FastAPI(
    title="SkinTone Styler Backend",
    description="Clothing color suggestions from a skin tone",
    version=config.SERVICE_VERSION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"]
)

app.include_router(v1_router)


@app.exception_handler(StylerError)
async def styler_error_handler(request: Request, exc: StylerError):
    """Answer with the status code the error class declares."""
    logger.bind(
        path=request.url.path,
        error_type=type(exc).__name__,
        status_code=exc.status_code
    ).warning(f"Request rejected: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.bind(path=request.url.path).opt(exception=exc).error("Unexpected error")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Service health check."""
    return HealthResponse(
        ok=True,
        version=config.SERVICE_VERSION,
        service=config.SERVICE_NAME
    )


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "SkinTone Styler Backend API",
        "version": config.SERVICE_VERSION,
        "endpoints": ["/healthz", "/v1/palette", "/v1/image", "/v1/eyedropper"]
    }
