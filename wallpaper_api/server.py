# wallpaper_api/server.py
from __future__ import annotations

import logging, os, time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from . import __version__
from .catalog import CATEGORIES
from .settings import AppSettings, load_settings
from .routes import privacy, status, wallpapers

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

ENDPOINTS = [
    *(f"GET {API_PREFIX}/wallpapers/{c}" for c in CATEGORIES),
    f"GET {API_PREFIX}/wallpapers/{{category}}/random",
    f"GET {API_PREFIX}/wallpapers",
    f"GET {API_PREFIX}/categories",
    "GET /privacy-policy (HTML)",
    f"GET {API_PREFIX}/privacy-policy (JSON)",
    "GET /health",
]


def _log_banner(s: AppSettings) -> None:
    logger.info(f"🚀 Wallpaper API listening on http://localhost:{s.port}")
    logger.info("📁 Place your images in:")
    for c in CATEGORIES:
        logger.info(f"   - {os.path.join(s.images_dir, c)}{os.sep}")
    logger.info("📡 API Endpoints:")
    for e in ENDPOINTS:
        logger.info(f"   - {e}")


# ------------------------------------------------------------
# App factory
# ------------------------------------------------------------
def build_app(settings: AppSettings | None = None) -> FastAPI:
    """Imported by start.py; tests pass their own settings."""
    s = settings if settings is not None else load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _log_banner(s)
        yield
        logger.info("👋 Wallpaper API stopped")

    app = FastAPI(title="Wallpaper API", version=__version__, lifespan=lifespan)
    app.state.settings = s
    app.state.boot_ts = time.time()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=s.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept", "Authorization"],
    )

    app.include_router(wallpapers.router, prefix=API_PREFIX)
    app.include_router(privacy.api_router, prefix=API_PREFIX)
    app.include_router(privacy.router)
    app.include_router(status.router)

    # Static images: <images_dir>/<category>/<file> -> /images/<category>/<file>
    if os.path.isdir(s.images_dir):
        app.mount("/images", StaticFiles(directory=s.images_dir), name="images")
    else:
        logger.warning(f"Image directory {s.images_dir} missing; /images is not served")

    return app
