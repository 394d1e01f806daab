"""
HueTone API application.

Serves dynamic color schemes, seed color extraction from pixels and HCT
conversions over HTTP.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from huetone.api.v1 import router as v1_router
from huetone.config import config
from huetone.schemas import HealthResponse
from huetone.services.colors import __version__
from huetone.utils.logging import get_logger

logger = get_logger()

app = FastAPI(
    title="HueTone Backend",
    description="Material-style dynamic color schemes from a seed color or an image's pixels",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:3001", "http://localhost:3002"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(v1_router)


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Service health check."""
    return HealthResponse(ok=True, version=__version__, service=config.SERVICE_NAME)


@app.get("/")
def root():
    """Service index."""
    return {"message": "HueTone API", "docs": "/docs", "health": "/healthz"}


logger.info("HueTone API initialized", extra={"log_level": config.LOG_LEVEL})
