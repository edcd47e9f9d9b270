# wallpaper_api/settings.py
from __future__ import annotations
from pydantic import BaseModel
from pathlib import Path
from typing import List
import json, os, threading

DEFAULT_SETTINGS_PATH = "config/settings.json"
_LOCK = threading.Lock()

# Environment variable -> settings field
ENV_OVERRIDES = {
    "WALLPAPER_IMAGES_DIR": "images_dir",
    "WALLPAPER_HOST": "host",
    "WALLPAPER_PORT": "port",
}

class AppSettings(BaseModel):
    images_dir: str = "images"
    privacy_policy_path: str = "privacy_policy.txt"
    privacy_policy_updated: str = "October 18, 2025"
    host: str = "0.0.0.0"
    port: int = 8664
    trust_forwarded_proto: bool = True
    cors_origins: List[str] = ["*"]

_settings_cache: AppSettings | None = None

def settings_path() -> Path:
    return Path(os.getenv("WALLPAPER_SETTINGS", DEFAULT_SETTINGS_PATH))

def load_settings() -> AppSettings:
    global _settings_cache
    with _LOCK:
        if _settings_cache is not None:
            return _settings_cache
        data: dict = {}
        path = settings_path()
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
        for env, field in ENV_OVERRIDES.items():
            value = os.getenv(env)
            if value:
                data[field] = value
        _settings_cache = AppSettings(**data)
        return _settings_cache

def reset_settings() -> None:
    global _settings_cache
    with _LOCK:
        _settings_cache = None
