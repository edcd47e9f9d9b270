# wallpaper_api/__init__.py
from __future__ import annotations

__version__ = "1.0.0"
