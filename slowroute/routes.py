"""Route handlers.

``/{delay}`` sleeps for the requested number of milliseconds, which gives
the timeout layer something to race against.
"""

import asyncio

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from slowroute.errors import BadRequest


MAX_DELAY_MS = 2**64 - 1

router = APIRouter()


def parse_delay(raw: str) -> int:
    """Parse an unsigned 64-bit millisecond count."""
    if not raw.isascii() or not raw.isdigit() or int(raw) > MAX_DELAY_MS:
        raise BadRequest(f"Invalid URL: Cannot parse `{raw}` to an unsigned integer")
    return int(raw)


@router.get("/", response_class=HTMLResponse)
async def root():
    return "<h1>Hello, World!</h1>"


@router.get("/{delay}", response_class=HTMLResponse)
async def delayed(delay: str):
    # Declared as str so a malformed value reaches the error translator
    # instead of FastAPI's 422 validation response
    ms = parse_delay(delay)
    await asyncio.sleep(ms / 1000.0)
    return "<h1>Made it!</h1>"
