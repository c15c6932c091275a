"""Shared persistent httpx clients for outbound calls.

Using persistent clients avoids creating a new TCP connection + TLS handshake
for every request to the provider or to the token exchange function.
"""

import httpx

from warhorn_demo.constants import API_TIMEOUT_EXTERNAL, HTTPX_TIMEOUT

# Connection pool limits
_POOL_LIMITS = httpx.Limits(
    max_connections=20,
    max_keepalive_connections=10,
    keepalive_expiry=30,
)

_provider_client: httpx.AsyncClient | None = None
_exchange_client: httpx.AsyncClient | None = None


def get_provider_client() -> httpx.AsyncClient:
    """Get persistent httpx client for the OAuth provider (token + GraphQL)."""
    global _provider_client
    if _provider_client is None:
        _provider_client = httpx.AsyncClient(
            timeout=API_TIMEOUT_EXTERNAL,
            limits=_POOL_LIMITS,
            http2=False,
        )
    return _provider_client


def get_exchange_client() -> httpx.AsyncClient:
    """Get persistent httpx client for calling the token exchange function."""
    global _exchange_client
    if _exchange_client is None:
        _exchange_client = httpx.AsyncClient(
            timeout=HTTPX_TIMEOUT,
            limits=_POOL_LIMITS,
            http2=False,
        )
    return _exchange_client


async def close_all_clients() -> None:
    """Close all persistent httpx clients. Call during app shutdown."""
    global _provider_client, _exchange_client
    if _provider_client is not None:
        await _provider_client.aclose()
        _provider_client = None
    if _exchange_client is not None:
        await _exchange_client.aclose()
        _exchange_client = None
