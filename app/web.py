from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from app.api import get_page
from render.page import render_page
from services.pipeline import RenderedPage

router = APIRouter(include_in_schema=False)


@router.get("/", name="station_page", response_class=HTMLResponse)
async def station_page(page: RenderedPage = Depends(get_page)) -> HTMLResponse:
    return HTMLResponse(render_page(page))
