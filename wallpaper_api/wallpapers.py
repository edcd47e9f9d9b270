# wallpaper_api/wallpapers.py
from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import logging
import random

from pydantic import BaseModel, ConfigDict, Field

from .catalog import (
    FALLBACK_TAG,
    FALLBACK_TITLE,
    IMAGE_EXTENSIONS,
    MAX_TAGS,
    MIN_TAGS,
    RESOLUTIONS,
    TAG_SETS,
    TITLES,
)

logger = logging.getLogger(__name__)


class DirectoryUnavailable(Exception):
    """The category folder could not be opened or enumerated."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"cannot read directory {path}: {cause}")


class Wallpaper(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    image_url: str = Field(alias="imageUrl")
    category: str
    tags: List[str]
    resolution: str


# ---------------------------
# Metadata helpers
# ---------------------------
def is_image_file(filename: str) -> bool:
    return Path(filename).suffix.lower() in IMAGE_EXTENSIONS


def _is_utf8_name(filename: str) -> bool:
    # undecodable bytes come back from the OS as lone surrogates
    try:
        filename.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def category_label(category: str) -> str:
    return category.title()


def random_title(category: str, rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    titles = TITLES.get(category)
    if not titles:
        return FALLBACK_TITLE
    return rng.choice(titles)


def random_tags(category: str, rng: Optional[random.Random] = None) -> List[str]:
    """
    Picks 2-4 distinct tags from the category vocabulary in random order.
    Categories without a vocabulary get the single fallback tag.
    """
    rng = rng or random
    available = TAG_SETS.get(category)
    if not available:
        return [FALLBACK_TAG]
    count = min(rng.randint(MIN_TAGS, MAX_TAGS), len(available))
    return rng.sample(available, k=count)


def random_resolution(rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    return rng.choice(RESOLUTIONS)


# ---------------------------
# Listing
# ---------------------------
def list_wallpapers(
    category: str,
    base_url: str,
    images_dir: Path | str = "images",
    rng: Optional[random.Random] = None,
) -> List[Wallpaper]:
    """
    Scans <images_dir>/<category> and describes every image file in it.

    Entries keep the directory enumeration order, ids start at 1 for each
    call, and title/tags/resolution are drawn fresh every time. Raises
    DirectoryUnavailable when the folder is missing or unreadable.
    """
    folder = Path(images_dir) / category
    try:
        entries = list(folder.iterdir())
    except OSError as e:
        logger.warning(f"Cannot scan {folder}: {e}")
        raise DirectoryUnavailable(folder, e) from e

    label = category_label(category)
    wallpapers: List[Wallpaper] = []
    for entry in entries:
        if entry.is_dir():
            continue
        if not is_image_file(entry.name):
            continue
        if not _is_utf8_name(entry.name):
            logger.warning(f"Skipping {entry!r}: file name is not valid UTF-8")
            continue
        wallpapers.append(Wallpaper(
            id=len(wallpapers) + 1,
            title=random_title(category, rng),
            image_url=f"{base_url}/images/{category}/{entry.name}",
            category=label,
            tags=random_tags(category, rng),
            resolution=random_resolution(rng),
        ))

    logger.debug(f"{len(wallpapers)} wallpapers in {folder}")
    return wallpapers
