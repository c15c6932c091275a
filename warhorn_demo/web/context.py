"""Template context helpers."""

from typing import Any

from fastapi import Request

from warhorn_demo.client.state import AppState
from warhorn_demo.config import get_settings


def get_base_context(request: Request, state: AppState) -> dict[str, Any]:
    """Get base context for all templates."""
    settings = get_settings()
    return {
        "request": request,
        "app_name": settings.app_name,
        "provider_name": settings.provider_name,
        "state": state,
        "viewer": state.viewer,
        "repositories": state.repositories,
        "error": state.error,
    }
