"""FastAPI dependencies binding a request to its visitor's ViewerApp."""

from typing import Annotated

import httpx
from fastapi import Depends, Request

from warhorn_demo.client.controller import ViewerApp
from warhorn_demo.client.store import session_store
from warhorn_demo.config import get_settings
from warhorn_demo.constants import SESSION_ID_KEY
from warhorn_demo.services.warhorn import WarhornClient, get_warhorn_client
from warhorn_demo.utils.http_client import get_exchange_client


def get_session_id(request: Request) -> str:
    """Get the visitor's session id, issuing one on first visit."""
    session_id = request.session.get(SESSION_ID_KEY)
    if not session_id:
        session_id = session_store.new_session_id()
        request.session[SESSION_ID_KEY] = session_id
    return session_id


async def get_viewer_app(
    session_id: Annotated[str, Depends(get_session_id)],
    warhorn: Annotated[WarhornClient, Depends(get_warhorn_client)],
    exchange_client: Annotated[httpx.AsyncClient, Depends(get_exchange_client)],
) -> ViewerApp:
    """Controller for the current visitor."""
    return ViewerApp(
        store=session_store,
        session_id=session_id,
        warhorn=warhorn,
        exchange_client=exchange_client,
        settings=get_settings(),
    )
