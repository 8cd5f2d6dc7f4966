"""
Memo Desk - Main FastAPI Application
"""

import logging
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from contextlib import asynccontextmanager

from .config import settings
from .api import memos_router, reports_router
from .core.logging_config import setup_logging
from .middleware import RequestLoggingMiddleware
from .storage import MemoStore, get_memo_store, init_memo_store
from .ui import INDEX_HTML

# Logger will be initialized after setup_logging() is called
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    setup_logging(settings)

    # Memos live only as long as the process
    init_memo_store()
    logger.info("Memo store initialized")

    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Report archive: {settings.report_archive_path if settings.report_archive_enabled else 'disabled'}")
    logger.info(f"Log level: {settings.log_level.upper()}")
    logger.info(f"Debug mode: {settings.debug}")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Create organizational memos, browse them and export HTML or CSV reports",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "X-Report-Memo-Count"],
)

# Add request logging middleware (after CORS)
if settings.log_api_requests:
    app.add_middleware(RequestLoggingMiddleware)

# Include routers
app.include_router(memos_router)
app.include_router(reports_router)


@app.get("/", response_class=HTMLResponse)
async def index():
    """Browser UI."""
    return HTMLResponse(INDEX_HTML)


@app.get("/health")
async def health_check(store: MemoStore = Depends(get_memo_store)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "memos": len(store)
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "memodesk.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
