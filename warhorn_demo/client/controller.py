"""Drives one visitor through the OAuth redirect flow.

    login_url()  -> browser navigates to the provider
    resume()     -> on page load, picks up a pending ``code`` from the URL,
                    calls the token exchange function, then the GraphQL API
    logout()     -> forgets everything
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from warhorn_demo.client.state import (
    AppState,
    AuthStatus,
    begin_authentication,
    complete_authentication,
    fail_authentication,
    logged_out,
    with_error,
)
from warhorn_demo.client.store import SessionStore
from warhorn_demo.config import Settings
from warhorn_demo.constants import (
    ERROR_AUTHENTICATION_INTERRUPTED,
    ERROR_INVALID_STATE,
    ERROR_NO_ACCESS_TOKEN,
)
from warhorn_demo.services.warhorn import WarhornClient, WarhornError
from warhorn_demo.utils.logging import LogContext

logger = logging.getLogger(__name__)


class ViewerApp:
    """Client application controller bound to one session.

    Usage:
        app = ViewerApp(session_store, sid, warhorn, exchange_client, settings)

        if await app.resume(request.query_params):
            ...  # callback handled, strip the code from the URL
        state = app.state
    """

    def __init__(
        self,
        store: SessionStore,
        session_id: str,
        warhorn: WarhornClient,
        exchange_client: httpx.AsyncClient,
        settings: Settings,
    ):
        self.store = store
        self.session_id = session_id
        self.warhorn = warhorn
        self.exchange_client = exchange_client
        self.settings = settings
        self.log = LogContext(logger, sid=session_id[:8])

    @property
    def state(self) -> AppState:
        return self.store.get(self.session_id)

    def _transition(self, state: AppState) -> AppState:
        return self.store.set(self.session_id, state)

    def login_url(self) -> str:
        """Authorization URL to navigate the browser to."""
        return self.warhorn.build_authorize_url(self.settings.oauth_state)

    async def resume(self, params: Mapping[str, str]) -> bool:
        """Resume a pending authorization from the callback URL.

        Returns True when the URL carried callback parameters (``code`` or
        ``error``), meaning the caller should strip them from the visible URL.
        At most one exchange is started per code: nothing happens while an
        exchange is in flight or once a viewer is established.
        """
        code = params.get("code")
        error = params.get("error")
        if not code and not error:
            return False

        state = self.state

        if not code:
            message = params.get("error_description") or error
            self.log.warning(f"Provider returned an authorization error: {error}")
            if state.is_authenticated:
                self._transition(with_error(state, message))
            else:
                self._transition(fail_authentication(state, message))
            return True

        if state.viewer is not None or state.loading:
            self.log.debug(f"Ignoring authorization code (status={state.status.value})")
            return True

        returned_state = params.get("state")
        if returned_state is not None and returned_state != self.settings.oauth_state:
            self.log.warning("OAuth state mismatch, refusing code")
            self._transition(fail_authentication(state, ERROR_INVALID_STATE))
            return True

        await self.authenticate(code)
        return True

    async def authenticate(self, code: str) -> AppState:
        """Exchange ``code`` for a token, then load the viewer.

        Every exit leaves the visitor out of the loading state. A result that
        arrives after the visitor logged out, or started over with another
        code, is dropped.
        """
        self._transition(begin_authentication(self.state, code))
        provider = self.settings.provider_name

        try:
            try:
                token_data = await self._exchange_code(code)
            except Exception as e:
                self.log.error(f"Token exchange call failed: {e!r}")
                return self._settle(
                    code,
                    f"Failed to authenticate with {provider}: {str(e) or type(e).__name__}",
                )

            access_token = token_data.get("access_token") if isinstance(token_data, dict) else None
            if not access_token:
                message = _token_error_message(token_data)
                self.log.warning(f"No access token received: {message}")
                return self._settle(code, message)

            try:
                viewer = await self.warhorn.fetch_viewer(access_token)
            except WarhornError as e:
                self.log.warning(f"Viewer query failed: {e}")
                return self._settle(code, f"Failed to fetch user data: {e}")

            if not self._is_pending(code):
                self.log.info("Discarding login result, session changed while authenticating")
                return self.state

            self.log.info(
                f"Authenticated as {viewer.login} ({len(viewer.repositories)} repositories)"
            )
            return self._transition(complete_authentication(self.state, access_token, viewer))

        except Exception as e:
            self.log.exception("Authentication failed unexpectedly")
            return self._settle(
                code, f"Failed to authenticate with {provider}: {str(e) or type(e).__name__}"
            )

        finally:
            # Cancelled mid-flight
            if self._is_pending(code):
                self._transition(fail_authentication(self.state, ERROR_AUTHENTICATION_INTERRUPTED))

    def _is_pending(self, code: str) -> bool:
        state = self.state
        return state.status is AuthStatus.AUTHENTICATING and state.pending_code == code

    def _settle(self, code: str, message: str) -> AppState:
        """Record a failed attempt, unless the session moved on meanwhile."""
        if not self._is_pending(code):
            self.log.info(f"Discarding login failure, session changed while authenticating: {message}")
            return self.state
        return self._transition(fail_authentication(self.state, message))

    async def _exchange_code(self, code: str) -> Any:
        response = await self.exchange_client.post(
            self.settings.token_exchange_endpoint,
            json={"code": code},
            headers={"Content-Type": "application/json"},
        )
        return response.json()

    def logout(self) -> AppState:
        """Clear viewer, repositories, token and error."""
        self.store.discard(self.session_id)
        self.log.info("Logged out")
        return logged_out(self.state)


def _token_error_message(token_data: Any) -> str:
    """Best message from a token exchange reply that carried no token."""
    if isinstance(token_data, dict):
        message = token_data.get("error") or token_data.get("details")
        if message:
            return str(message)
    return ERROR_NO_ACCESS_TOKEN
