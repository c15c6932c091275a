"""Session state API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from warhorn_demo.client.controller import ViewerApp
from warhorn_demo.client.dependencies import get_viewer_app

router = APIRouter()


@router.get("")
async def get_session(
    viewer_app: Annotated[ViewerApp, Depends(get_viewer_app)],
) -> dict[str, Any]:
    """Get the current visitor's state (without the access token)."""
    return viewer_app.state.to_public_dict()
