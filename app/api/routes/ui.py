from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"
INDEX_FILE = STATIC_DIR / "index.html"

router = APIRouter()


@router.get("/", include_in_schema=False)
def index() -> FileResponse:
    """Serve the single-page faucet form."""

    return FileResponse(INDEX_FILE, media_type="text/html")
