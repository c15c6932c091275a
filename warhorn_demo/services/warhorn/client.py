"""Warhorn OAuth + GraphQL client.

Wraps the three provider-hosted endpoints the demo talks to:

- authorization endpoint (browser redirect, URL built here)
- token endpoint (server-to-server code exchange, confidential)
- GraphQL endpoint (viewer profile + recent repositories)
"""

import logging
from typing import Any

import httpx
from authlib.oauth2.rfc6749.parameters import prepare_grant_uri
from pydantic import ValidationError

from warhorn_demo.config import Settings
from warhorn_demo.constants import GRANT_TYPE_AUTHORIZATION_CODE, RECENT_REPOSITORIES_LIMIT
from warhorn_demo.models.viewer import Viewer

logger = logging.getLogger(__name__)

VIEWER_QUERY = f"""
query {{
  viewer {{
    login
    name
    email
    avatarUrl
    bio
    location
    company
    createdAt
    followers {{
      totalCount
    }}
    following {{
      totalCount
    }}
    repositories(first: {RECENT_REPOSITORIES_LIMIT}, orderBy: {{field: UPDATED_AT, direction: DESC}}) {{
      nodes {{
        name
        description
        stargazerCount
        forkCount
        primaryLanguage {{
          name
          color
        }}
        url
        updatedAt
      }}
    }}
  }}
}}
"""


class WarhornError(Exception):
    """Base exception for provider errors."""

    pass


class WarhornConnectionError(WarhornError):
    """The provider could not be reached."""

    pass


class WarhornAPIError(WarhornError):
    """The provider answered with something unusable."""

    pass


class WarhornGraphQLError(WarhornError):
    """The GraphQL response carried an ``errors`` array."""

    def __init__(self, errors: list[dict[str, Any]]):
        self.errors = errors
        message = "GraphQL error"
        if errors and isinstance(errors[0], dict):
            message = errors[0].get("message") or message
        super().__init__(message)


class WarhornClient:
    """Client for the Warhorn OAuth and GraphQL endpoints.

    Usage:
        client = WarhornClient(http_client, settings)

        url = client.build_authorize_url()
        token_payload = await client.exchange_code("abc123")
        viewer = await client.fetch_viewer(token_payload["access_token"])
    """

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings):
        """Initialize the client.

        Args:
            http_client: Shared httpx client used for every provider call
            settings: Application settings (credentials and endpoint URLs)
        """
        self.http_client = http_client
        self.settings = settings

    def build_authorize_url(self, state: str | None = None) -> str:
        """Build the authorization URL the browser is sent to for consent."""
        return prepare_grant_uri(
            self.settings.warhorn_authorize_url,
            client_id=self.settings.warhorn_client_id,
            response_type="code",
            redirect_uri=self.settings.redirect_uri,
            scope=self.settings.oauth_scope,
            state=state or self.settings.oauth_state,
        )

    def token_request_body(self, code: str) -> dict[str, str]:
        """Fields posted to the token endpoint for an authorization code."""
        return {
            "grant_type": GRANT_TYPE_AUTHORIZATION_CODE,
            "code": code,
            "redirect_uri": self.settings.redirect_uri,
            "client_id": self.settings.warhorn_client_id,
            "client_secret": self.settings.warhorn_client_secret,
        }

    async def exchange_code(self, code: str) -> Any:
        """Exchange an authorization code at the token endpoint.

        The provider's JSON is returned as-is, including OAuth error
        payloads; callers decide how to relay it.

        Raises:
            httpx.HTTPError: On transport failure
            ValueError: If the provider reply is not JSON
        """
        response = await self.http_client.post(
            self.settings.warhorn_token_url,
            json=self.token_request_body(code),
            headers={"Accept": "application/json"},
        )
        return response.json()

    async def fetch_viewer(self, access_token: str) -> Viewer:
        """Fetch the viewer profile and recent repositories.

        Raises:
            WarhornConnectionError: On transport failure
            WarhornGraphQLError: When the response carries ``errors``
            WarhornAPIError: On HTTP errors or an unexpected payload
        """
        try:
            response = await self.http_client.post(
                self.settings.warhorn_graphql_url,
                json={"query": VIEWER_QUERY},
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "Content-Type": "application/json",
                },
            )
        except httpx.HTTPError as e:
            raise WarhornConnectionError(str(e) or type(e).__name__) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise WarhornAPIError(
                f"Invalid GraphQL response (HTTP {response.status_code})"
            ) from e

        if not isinstance(payload, dict):
            raise WarhornAPIError("Invalid GraphQL response")

        if payload.get("errors"):
            raise WarhornGraphQLError(payload["errors"])

        if response.status_code >= 400:
            raise WarhornAPIError(f"API error {response.status_code}")

        data = payload.get("data")
        viewer = data.get("viewer") if isinstance(data, dict) else None
        if not viewer:
            raise WarhornAPIError("No viewer in GraphQL response")
        if not isinstance(viewer, dict):
            raise WarhornAPIError("Unexpected viewer payload: not an object")

        try:
            parsed = Viewer.from_graphql(viewer)
        except ValidationError as e:
            raise WarhornAPIError(f"Unexpected viewer payload: {e.error_count()} invalid fields") from e
        except (TypeError, ValueError, AttributeError) as e:
            raise WarhornAPIError(f"Unexpected viewer payload: {e}") from e

        logger.debug(f"Fetched viewer {parsed.login}")
        return parsed
