# wallpaper_api/catalog.py - fixed catalogs shared by every request
from __future__ import annotations
from typing import Dict, Tuple

CATEGORIES: Tuple[str, ...] = ("nature", "culture", "digital")

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp", ".bmp"})

RESOLUTIONS: Tuple[str, ...] = (
    "1080x1920",
    "1440x2560",
    "2160x3840",
    "1080x2340",
    "1170x2532",
)

FALLBACK_TITLE = "Beautiful Wallpaper"
FALLBACK_TAG = "wallpaper"

MIN_TAGS = 2
MAX_TAGS = 4

# === TITLES ===

TITLES: Dict[str, Tuple[str, ...]] = {
    "nature": (
        "Serene Landscape", "Mountain Vista", "Ocean Breeze", "Forest Path",
        "Sunset Glory", "River Flow", "Desert Bloom", "Alpine View",
        "Coastal Beauty", "Wilderness", "Garden Paradise", "Peaceful Lake",
    ),
    "culture": (
        "Ancient Heritage", "Traditional Art", "Cultural Festival", "Historic Monument",
        "Ethnic Pattern", "Sacred Temple", "Folk Design", "Heritage Site",
        "Cultural Symbol", "Traditional Craft", "Ancient Wisdom", "Cultural Legacy",
    ),
    "digital": (
        "Cyber Grid", "Digital Wave", "Neon Dreams", "Tech Pattern",
        "Futuristic Design", "Digital Art", "Cyber Space", "Modern Abstract",
        "Tech Innovation", "Digital Future", "Cyber Aesthetic", "Virtual Reality",
    ),
}

# === TAGS ===

TAG_SETS: Dict[str, Tuple[str, ...]] = {
    "nature": (
        "landscape", "natural", "scenic", "outdoor", "peaceful",
        "green", "blue", "mountains", "ocean", "forest",
    ),
    "culture": (
        "traditional", "heritage", "ancient", "artistic", "cultural",
        "historic", "ethnic", "sacred", "folk", "classic",
    ),
    "digital": (
        "modern", "futuristic", "tech", "cyber", "digital",
        "abstract", "neon", "geometric", "virtual", "electronic",
    ),
}


def is_valid_category(category: str) -> bool:
    return category in CATEGORIES


def invalid_category_message() -> str:
    """Hint returned for unknown categories, e.g. 'Use: nature, culture, or digital'."""
    if len(CATEGORIES) == 1:
        return f"Invalid category. Use: {CATEGORIES[0]}"
    head = ", ".join(CATEGORIES[:-1])
    return f"Invalid category. Use: {head}, or {CATEGORIES[-1]}"
