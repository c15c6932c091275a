"""Web routes for Jinja2 templates."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from warhorn_demo.client.controller import ViewerApp
from warhorn_demo.client.dependencies import get_viewer_app
from warhorn_demo.web.context import get_base_context

logger = logging.getLogger(__name__)

web_router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

# Query parameters the provider appends to the redirect URI
CALLBACK_PARAMS = frozenset({"code", "state", "error", "error_description", "error_uri"})


def format_date(value: datetime | None) -> str:
    """Format a timestamp like ``Oct 8, 2026``."""
    if not value:
        return ""
    return f"{value:%b} {value.day}, {value.year}"


templates.env.filters["format_date"] = format_date


def strip_callback_params(request: Request) -> str:
    """Current URL minus the OAuth callback parameters."""
    remaining = [
        (key, value)
        for key, value in request.query_params.multi_items()
        if key not in CALLBACK_PARAMS
    ]
    path = request.url.path
    return f"{path}?{urlencode(remaining)}" if remaining else path


@web_router.get("/", response_class=HTMLResponse, response_model=None)
async def index(
    request: Request,
    viewer_app: Annotated[ViewerApp, Depends(get_viewer_app)],
) -> HTMLResponse | RedirectResponse:
    """Render the app, resuming a pending authorization first."""
    if await viewer_app.resume(request.query_params):
        # Never leave the code in the address bar: a refresh would replay it
        return RedirectResponse(url=strip_callback_params(request), status_code=302)

    state = viewer_app.state
    context = get_base_context(request, state)
    if state.loading:
        return templates.TemplateResponse(request, "pages/loading.html", context)
    return templates.TemplateResponse(request, "pages/index.html", context)


@web_router.get("/login")
async def login(
    viewer_app: Annotated[ViewerApp, Depends(get_viewer_app)],
) -> RedirectResponse:
    """Send the browser to the provider's authorization page."""
    return RedirectResponse(url=viewer_app.login_url(), status_code=302)


@web_router.get("/logout")
async def logout(
    viewer_app: Annotated[ViewerApp, Depends(get_viewer_app)],
) -> RedirectResponse:
    """Forget the viewer and go back to the login card."""
    viewer_app.logout()
    return RedirectResponse(url="/", status_code=302)
