# wallpaper_api/routes/wallpapers.py
from __future__ import annotations
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from typing import List
import logging, random

from ..catalog import CATEGORIES, invalid_category_message, is_valid_category
from ..settings import AppSettings
from ..wallpapers import DirectoryUnavailable, Wallpaper, list_wallpapers
from . import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------
# Helpers
# ---------------------------
def base_url(request: Request, trust_forwarded_proto: bool = True) -> str:
    """scheme://host of the incoming request, honouring TLS and X-Forwarded-Proto."""
    scheme = "http"
    if request.url.scheme == "https":
        scheme = "https"
    elif trust_forwarded_proto and request.headers.get("x-forwarded-proto", "").lower() == "https":
        scheme = "https"
    host = request.headers.get("host") or request.url.netloc
    return f"{scheme}://{host}"


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"success": False, "message": message}, status_code=status_code)


def _success(wallpapers: List[Wallpaper]) -> dict:
    return {"success": True, "data": [w.model_dump(by_alias=True) for w in wallpapers]}


def _load(request: Request, category: str, s: AppSettings) -> List[Wallpaper]:
    return list_wallpapers(
        category,
        base_url(request, s.trust_forwarded_proto),
        images_dir=s.images_dir,
    )


# ---------------------------
# Routes
# ---------------------------
@router.get("/wallpapers")
def get_all_wallpapers(request: Request, s: AppSettings = Depends(get_settings)):
    items: List[Wallpaper] = []
    for category in CATEGORIES:
        try:
            items.extend(_load(request, category, s))
        except DirectoryUnavailable as e:
            logger.warning(f"Error loading {category} wallpapers: {e}")
            continue
    return _success(items)


@router.get("/wallpapers/{category}")
def get_wallpapers_by_category(category: str, request: Request,
                               s: AppSettings = Depends(get_settings)):
    if not is_valid_category(category):
        return _failure(400, invalid_category_message())
    try:
        items = _load(request, category, s)
    except DirectoryUnavailable as e:
        logger.error(f"Listing {category} failed: {e}")
        return _failure(500, f"Error loading wallpapers: {e}")
    return _success(items)


@router.get("/wallpapers/{category}/random")
def get_random_wallpaper(category: str, request: Request,
                         s: AppSettings = Depends(get_settings)):
    if not is_valid_category(category):
        return _failure(400, invalid_category_message())
    try:
        items = _load(request, category, s)
    except DirectoryUnavailable as e:
        logger.error(f"Listing {category} failed: {e}")
        return _failure(500, f"Error loading wallpapers: {e}")
    if not items:
        return _failure(404, "No wallpapers found in this category")
    return _success([random.choice(items)])


@router.get("/categories")
def get_categories():
    return {"success": True, "categories": list(CATEGORIES)}
