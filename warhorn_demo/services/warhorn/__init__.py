"""Warhorn provider integration.

Usage:
    from warhorn_demo.services.warhorn import WarhornClient, get_warhorn_client

    client = get_warhorn_client()
    viewer = await client.fetch_viewer(access_token)
"""

from warhorn_demo.config import get_settings
from warhorn_demo.services.warhorn.client import (
    VIEWER_QUERY,
    WarhornAPIError,
    WarhornClient,
    WarhornConnectionError,
    WarhornError,
    WarhornGraphQLError,
)
from warhorn_demo.utils.http_client import get_provider_client


def get_warhorn_client() -> WarhornClient:
    """FastAPI dependency returning a client bound to the shared httpx client."""
    return WarhornClient(get_provider_client(), get_settings())


__all__ = [
    "VIEWER_QUERY",
    "WarhornAPIError",
    "WarhornClient",
    "WarhornConnectionError",
    "WarhornError",
    "WarhornGraphQLError",
    "get_warhorn_client",
]
