"""FastAPI application for the gym-companion web interface."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from .. import __version__
from ..ai.client import GatewayClient
from ..config import Settings, get_settings
from ..db.engine import get_db_path, init_db
from ..services.job_tracker import JobTracker
from .routers import functions, jobs, machines, pages

logger = logging.getLogger(__name__)

# Template and static file paths
TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    await init_db(app.state.db_path)
    logger.info("Database ready at %s", app.state.db_path)
    yield


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment
        transport: Optional httpx transport for the AI gateway client
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="gym-companion",
        description="Identify gym machines from photos and plan exercises for them",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.db_path = get_db_path(settings.data_dir)
    app.state.gateway = GatewayClient(settings, transport=transport)
    app.state.job_tracker = JobTracker()
    app.state.templates = Jinja2Templates(directory=TEMPLATES_DIR)

    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    app.include_router(pages.router)
    app.include_router(machines.router)
    app.include_router(jobs.router)
    app.include_router(functions.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
