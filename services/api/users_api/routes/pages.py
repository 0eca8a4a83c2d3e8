"""Landing page.

GET / - Returns the HTML template, read from disk on every request.
"""

import logging
from pathlib import Path

import anyio
from fastapi import APIRouter
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

logger = logging.getLogger("uvicorn.error")

router = APIRouter()

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
INDEX_TEMPLATE = TEMPLATES_DIR / "index.html"


@router.get("/", response_class=HTMLResponse)
async def index() -> Response:
    """Serve the landing page.

    Returns:
        200 with the template HTML, or 500 plain text if it cannot be read.
    """
    try:
        html = await anyio.Path(INDEX_TEMPLATE).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.exception(f"Error reading template {INDEX_TEMPLATE}")
        return PlainTextResponse("Internal Server Error", status_code=500)
    return HTMLResponse(html)
