"""Tests for the in-memory session store."""

import pytest

from warhorn_demo.client.state import INITIAL_STATE, begin_authentication, with_error
from warhorn_demo.client.store import SESSION_TTL_SECONDS, SessionStore


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


class TestSessionStore:
    """Bounded, expiring per-visitor state."""

    def test_unknown_session_is_initial_state(self):
        assert SessionStore().get("nobody") is INITIAL_STATE

    def test_initial_state_is_not_stored(self):
        store = SessionStore()

        store.set("sid", INITIAL_STATE)

        assert len(store) == 0

    def test_returning_to_initial_state_frees_the_entry(self):
        store = SessionStore()
        store.set("sid", with_error(INITIAL_STATE, "denied"))

        store.set("sid", INITIAL_STATE)

        assert len(store) == 0

    def test_entries_expire_with_the_session(self, clock: FakeClock):
        store = SessionStore(timer=clock)
        store.set("sid", begin_authentication(INITIAL_STATE, "abc123"))

        clock.now = SESSION_TTL_SECONDS + 1

        assert store.get("sid") is INITIAL_STATE
        assert len(store) == 0

    def test_access_extends_expiry(self, clock: FakeClock):
        store = SessionStore(ttl=100, timer=clock)
        state = with_error(INITIAL_STATE, "denied")
        store.set("sid", state)

        clock.now = 80
        assert store.get("sid") == state
        clock.now = 160

        assert store.get("sid") == state

    def test_size_is_capped(self):
        store = SessionStore(maxsize=3)

        for i in range(50):
            store.set(f"sid-{i}", with_error(INITIAL_STATE, "Invalid OAuth state"))

        assert len(store) == 3
        assert store.get("sid-49").error == "Invalid OAuth state"
        assert store.get("sid-0") is INITIAL_STATE
