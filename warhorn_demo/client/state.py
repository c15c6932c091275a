"""Immutable UI state for one visitor and its transitions.

Every transition returns a new ``AppState``; nothing mutates a state in
place. The error message is an overlay: it can accompany any status.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from warhorn_demo.models.viewer import Repository, Viewer


class AuthStatus(str, Enum):
    """Where the visitor is in the login flow."""

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class AppState:
    """Snapshot of what the page shows."""

    status: AuthStatus = AuthStatus.UNAUTHENTICATED
    viewer: Viewer | None = None
    repositories: tuple[Repository, ...] = ()
    error: str | None = None
    access_token: str | None = field(default=None, repr=False)
    pending_code: str | None = field(default=None, repr=False)

    @property
    def loading(self) -> bool:
        return self.status is AuthStatus.AUTHENTICATING

    @property
    def is_authenticated(self) -> bool:
        return self.status is AuthStatus.AUTHENTICATED and self.viewer is not None

    def to_public_dict(self) -> dict[str, Any]:
        """JSON-safe view of the state. Never includes the token or code."""
        return {
            "status": self.status.value,
            "loading": self.loading,
            "error": self.error,
            "viewer": (
                self.viewer.model_dump(mode="json", exclude={"repositories"})
                if self.viewer
                else None
            ),
            "repositories": [repo.model_dump(mode="json") for repo in self.repositories],
        }


INITIAL_STATE = AppState()


def begin_authentication(state: AppState, code: str) -> AppState:
    """unauthenticated -> authenticating. Clears any previous error."""
    return replace(
        state,
        status=AuthStatus.AUTHENTICATING,
        error=None,
        pending_code=code,
    )


def complete_authentication(state: AppState, access_token: str, viewer: Viewer) -> AppState:
    """authenticating -> authenticated, repositories kept in returned order."""
    return replace(
        state,
        status=AuthStatus.AUTHENTICATED,
        viewer=viewer,
        repositories=viewer.repositories,
        access_token=access_token,
        error=None,
        pending_code=None,
    )


def fail_authentication(state: AppState, message: str) -> AppState:
    """authenticating -> unauthenticated with the error overlay shown."""
    return replace(
        state,
        status=AuthStatus.UNAUTHENTICATED,
        viewer=None,
        repositories=(),
        access_token=None,
        error=message,
        pending_code=None,
    )


def with_error(state: AppState, message: str) -> AppState:
    """Show an error without changing status."""
    return replace(state, error=message)


def logged_out(state: AppState) -> AppState:
    """Drop everything the visitor was holding."""
    return INITIAL_STATE
