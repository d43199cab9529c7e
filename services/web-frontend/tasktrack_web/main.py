"""
TASKTRACK Web Frontend - Main Application

Browser-facing service. It holds no data of its own: every view is built
from core API calls, and views degrade to an error notice when the core
API is unavailable.
"""

import logging
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from tasktrack_web.config import settings
from tasktrack_web.router import router as task_views_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Task list, create and edit views for TASKTRACK",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """
    Health check endpoint.

    Reports this service only; the core API is not probed.
    """
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "core_api_url": settings.CORE_API_URL,
    }


@app.get("/", tags=["Root"])
async def root() -> RedirectResponse:
    """The task list is the home page."""
    return RedirectResponse(url="/tasks")


app.include_router(task_views_router)
