"""FileGate FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from filegate import __version__
from filegate.config import Settings, get_settings
from filegate.services.directory_lister import DirectoryLister

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    settings: Settings = app.state.settings
    logger.info(
        "FileGate v%s serving %s on http://%s:%s",
        __version__, app.state.lister.root, settings.host, settings.port,
    )
    try:
        yield
    finally:
        logger.info("FileGate shutting down")


def setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for noisy in ("multipart", "watchfiles"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an app bound to one root directory.

    Without explicit settings the environment is used
    (``uvicorn --factory filegate.main:create_app``).
    """
    from filegate.api.routes import api_router, download_router

    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        lifespan=_lifespan,
    )
    app.state.settings = settings
    app.state.lister = DirectoryLister(settings.root_path, probe_bytes=settings.probe_bytes)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "HEAD", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.api_prefix)
    app.include_router(download_router)

    # Frontend last: a mount at "/" shadows every route registered after it
    frontend_dir = Path(settings.frontend_dir).expanduser()
    if frontend_dir.is_dir():
        app.mount("/", StaticFiles(directory=frontend_dir, html=True), name="frontend")
        logger.info("Frontend mounted from %s", frontend_dir.resolve())
    else:
        logger.info("No frontend found at %s, API-only mode", frontend_dir)

    return app


def run(settings: Settings, **kwargs: Any) -> None:
    import uvicorn

    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.idle_timeout_seconds,
        log_level=settings.log_level.lower(),
        **kwargs,
    )
