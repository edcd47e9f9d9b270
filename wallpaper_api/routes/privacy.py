# wallpaper_api/routes/privacy.py
from __future__ import annotations
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, JSONResponse
from pathlib import Path
import html, logging

from ..settings import AppSettings
from . import get_settings

logger = logging.getLogger(__name__)

# HTML page at the root, JSON variant under /api/v1
router = APIRouter()
api_router = APIRouter()

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>Privacy Policy - Roal Wallpaper</title>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <style>
        body {{
            font-family: Arial, sans-serif;
            line-height: 1.6;
            margin: 0;
            padding: 20px;
            background-color: #f4f4f4;
        }}
        .container {{
            max-width: 800px;
            margin: 0 auto;
            background: white;
            padding: 30px;
            border-radius: 10px;
            box-shadow: 0 0 10px rgba(0,0,0,0.1);
        }}
        h1 {{
            color: #333;
            text-align: center;
            margin-bottom: 30px;
        }}
        pre {{
            white-space: pre-wrap;
            font-family: Arial, sans-serif;
            color: #444;
        }}
    </style>
</head>
<body>
    <div class="container">
        <h1>Privacy Policy</h1>
        <pre>{content}</pre>
    </div>
</body>
</html>"""


def read_policy(path: str) -> str | None:
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.error(f"Privacy policy unreadable ({path}): {e}")
        return None


def _not_found() -> JSONResponse:
    return JSONResponse({"error": "Privacy policy not found"}, status_code=500)


@router.get("/privacy-policy", response_class=HTMLResponse)
def privacy_policy_page(s: AppSettings = Depends(get_settings)):
    content = read_policy(s.privacy_policy_path)
    if content is None:
        return _not_found()
    return HTMLResponse(PAGE_TEMPLATE.format(content=html.escape(content)))


@api_router.get("/privacy-policy")
def privacy_policy_json(s: AppSettings = Depends(get_settings)):
    content = read_policy(s.privacy_policy_path)
    if content is None:
        return _not_found()
    return {
        "success": True,
        "privacy_policy": content,
        "last_updated": s.privacy_policy_updated,
    }
