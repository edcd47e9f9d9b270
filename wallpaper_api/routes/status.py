# wallpaper_api/routes/status.py
from fastapi import APIRouter, Request
import time

router = APIRouter()

@router.get("/health")
async def health(request: Request):
    boot_ts = getattr(request.app.state, "boot_ts", time.time())
    return {
        "status": "ok",
        "message": "Wallpaper API is running",
        "uptime_sec": int(time.time() - boot_ts),
    }
