"""In-process store of per-visitor UI state.

Only a random session id travels in the signed session cookie; the state
itself (including the access token) stays in memory and is gone when the
process restarts. Entries expire with the session cookie, and the store is
capped so that cookieless callback floods cannot grow it without bound.
"""

import secrets
import time
from collections.abc import Callable

from cachetools import TTLCache

from warhorn_demo.client.state import INITIAL_STATE, AppState
from warhorn_demo.constants import SESSION_STORE_MAX_ENTRIES, SESSION_TIMEOUT_DAYS

SESSION_TTL_SECONDS = 60 * 60 * 24 * SESSION_TIMEOUT_DAYS


class SessionStore:
    """Maps session ids to the visitor's current ``AppState``.

    Visitors in the initial state are not stored at all.
    """

    def __init__(
        self,
        maxsize: int = SESSION_STORE_MAX_ENTRIES,
        ttl: float = SESSION_TTL_SECONDS,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._states: TTLCache[str, AppState] = TTLCache(maxsize=maxsize, ttl=ttl, timer=timer)

    @staticmethod
    def new_session_id() -> str:
        return secrets.token_urlsafe(16)

    def get(self, session_id: str) -> AppState:
        state = self._states.get(session_id)
        if state is None:
            return INITIAL_STATE
        # Sliding expiry, like the session cookie
        self._states[session_id] = state
        return state

    def set(self, session_id: str, state: AppState) -> AppState:
        if state == INITIAL_STATE:
            self.discard(session_id)
        else:
            self._states[session_id] = state
        return state

    def discard(self, session_id: str) -> None:
        self._states.pop(session_id, None)

    def clear(self) -> None:
        self._states.clear()

    def __len__(self) -> int:
        self._states.expire()
        return len(self._states)


session_store = SessionStore()
