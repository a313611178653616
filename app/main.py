"""
FastAPI Application Entry Point

Load recommendation service with lifecycle management for the fleet HTTP client.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.api import API_VERSION, recommendations_router
from app.constants.constants import TRACE_HEADER_NAME, normalize_trace_id
from app.core.config import settings
from app.core.logging import set_trace_id, setup_logging

setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Closes the fleet service client on shutdown.
    """
    logger.info(f"Load recommendation service starting up ({settings.APP_ENV})...")

    yield

    logger.info("Load recommendation service shutting down...")

    try:
        from app.tools import fleet_service_client
        await fleet_service_client.aclose_client()
        logger.info("Closed Fleet Service client")
    except Exception as e:
        logger.error(f"Error closing fleet_service_client: {e}")

    logger.info("Load recommendation service shutdown complete")


app = FastAPI(
    title="Load Recommendation Service",
    description="Scores and ranks load board listings for trucks and drivers",
    version=API_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def trace_id_middleware(request: Request, call_next):
    """Bind x-request-id (or a fresh UUID) to the logging context and echo it back."""
    trace_id = normalize_trace_id(request.headers.get(TRACE_HEADER_NAME))
    set_trace_id(trace_id)
    response = await call_next(request)
    response.headers[TRACE_HEADER_NAME] = trace_id
    return response


app.include_router(recommendations_router, prefix="/api")
logger.info("Registered recommendations router")


@app.get("/")
async def root():
    """Service banner."""
    return {
        "service": "Load Recommendation Service",
        "status": "running",
        "version": API_VERSION
    }


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "load_recommendation_service",
        "components": {
            "api": "ok",
            "engine": "ok"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
