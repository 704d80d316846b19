from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from citemap.core.deps import get_settings
from citemap.core.settings import Settings

router = APIRouter(tags=["ui"])
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))


@router.get("/ui", response_class=HTMLResponse)
def home(request: Request, settings: Settings = Depends(get_settings)):
    return templates.TemplateResponse(
        request,
        "index.html",
        {"api_url": settings.api_url, "debounce_ms": 1000},
    )
