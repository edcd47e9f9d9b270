# wallpaper_api/routes/__init__.py
from __future__ import annotations
from fastapi import Request

from ..settings import AppSettings, load_settings


def get_settings(request: Request) -> AppSettings:
    """Settings the app was built with, falling back to the global ones."""
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else load_settings()
