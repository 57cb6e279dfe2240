"""Landing and room pages."""
from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, Response

from .. import pages

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serve the room picker."""

    return HTMLResponse(content=pages.LANDING_PAGE)


@router.head("/")
async def index_head() -> Response:
    """Fast health checks issue HEAD /; answer with 200 to avoid noisy 405s."""

    return Response(status_code=200)


# Room names may contain "/" once decoded, so the whole remainder is the name.
@router.get("/room/{room:path}", response_class=HTMLResponse)
async def room_page(room: str) -> HTMLResponse:
    if not room:
        raise HTTPException(status_code=404, detail="Not Found")
    return HTMLResponse(content=pages.render_room_page(room))
