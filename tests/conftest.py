"""Pytest configuration and fixtures."""

import json
import os
from collections.abc import AsyncGenerator, Callable
from typing import Any

# Settings are read at import time of the app
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("APP_SECRET_KEY", "test-secret-key-with-at-least-32-characters")
os.environ.setdefault("APP_URL", "http://test")
os.environ.setdefault("WARHORN_CLIENT_ID", "test-client-id")
os.environ.setdefault("WARHORN_CLIENT_SECRET", "test-client-secret")

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from warhorn_demo.client.store import session_store
from warhorn_demo.config import get_settings
from warhorn_demo.main import app
from warhorn_demo.services.warhorn import WarhornClient, get_warhorn_client
from warhorn_demo.utils.http_client import get_exchange_client


def make_repository(name: str, **overrides: Any) -> dict[str, Any]:
    """GraphQL repository node."""
    node = {
        "name": name,
        "description": f"{name} description",
        "stargazerCount": 3,
        "forkCount": 1,
        "primaryLanguage": {"name": "Python", "color": "#3572A5"},
        "url": f"https://warhorn.net/repos/{name}",
        "updatedAt": "2024-03-08T12:00:00Z",
    }
    node.update(overrides)
    return node


def make_viewer(repositories: list[dict[str, Any]] | None = None, **overrides: Any) -> dict[str, Any]:
    """GraphQL ``viewer`` object."""
    viewer = {
        "login": "octo",
        "name": "Octo Cat",
        "email": "octo@example.com",
        "avatarUrl": "https://warhorn.net/avatars/octo.png",
        "bio": "Plays tabletop games",
        "location": "Seattle",
        "company": None,
        "createdAt": "2020-01-05T10:00:00Z",
        "followers": {"totalCount": 12},
        "following": {"totalCount": 4},
        "repositories": {
            "nodes": repositories
            if repositories is not None
            else [make_repository("alpha"), make_repository("beta")]
        },
    }
    viewer.update(overrides)
    return viewer


class FakeProvider:
    """Stands in for the token and GraphQL endpoints of the provider."""

    def __init__(self) -> None:
        self.token_response: tuple[int, Any] = (
            200,
            {"access_token": "tok", "token_type": "Bearer", "scope": "openid email profile"},
        )
        self.graphql_response: tuple[int, Any] = (200, {"data": {"viewer": make_viewer()}})
        self.token_error: Exception | None = None
        self.graphql_error: Exception | None = None
        self.token_requests: list[dict[str, Any]] = []
        self.graphql_requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        settings = get_settings()
        url = str(request.url)

        if url == settings.warhorn_token_url:
            self.token_requests.append(json.loads(request.content))
            if self.token_error:
                raise self.token_error
            status, body = self.token_response
        elif url == settings.warhorn_graphql_url:
            self.graphql_requests.append(request)
            if self.graphql_error:
                raise self.graphql_error
            status, body = self.graphql_response
        else:
            return httpx.Response(404, json={"error": "not found"})

        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)


@pytest.fixture(autouse=True)
def clear_session_store() -> None:
    """Start every test with no visitor state."""
    session_store.clear()


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def viewer_factory() -> Callable[..., dict[str, Any]]:
    return make_viewer


@pytest.fixture
def repository_factory() -> Callable[..., dict[str, Any]]:
    return make_repository


@pytest_asyncio.fixture
async def provider_http(fake_provider: FakeProvider) -> AsyncGenerator[httpx.AsyncClient, None]:
    """httpx client whose requests are answered by the fake provider."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_provider.handler)) as http:
        yield http


@pytest.fixture
def warhorn_client(provider_http: httpx.AsyncClient) -> WarhornClient:
    return WarhornClient(provider_http, get_settings())


@pytest_asyncio.fixture
async def client(warhorn_client: WarhornClient) -> AsyncGenerator[AsyncClient, None]:
    """Test client for the whole app.

    The client application reaches the token exchange function in-process,
    and both talk to the fake provider.
    """
    exchange_http = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")

    app.dependency_overrides[get_warhorn_client] = lambda: warhorn_client
    app.dependency_overrides[get_exchange_client] = lambda: exchange_http

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    await exchange_http.aclose()
    app.dependency_overrides.clear()
