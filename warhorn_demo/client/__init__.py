"""Client application: the visitor-facing half of the login flow."""

from warhorn_demo.client.controller import ViewerApp
from warhorn_demo.client.state import AppState, AuthStatus
from warhorn_demo.client.store import SessionStore, session_store

__all__ = [
    "AppState",
    "AuthStatus",
    "SessionStore",
    "ViewerApp",
    "session_store",
]
