"""Pydantic models for the provider's GraphQL viewer payload."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class _GraphQLModel(BaseModel):
    """Immutable model populated from camelCase GraphQL fields."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Language(_GraphQLModel):
    """Primary language of a repository."""

    name: str
    color: str | None = None


class Repository(_GraphQLModel):
    """Repository summary shown as a card."""

    name: str
    description: str | None = None
    stargazer_count: int = Field(default=0, alias="stargazerCount")
    fork_count: int = Field(default=0, alias="forkCount")
    primary_language: Language | None = Field(default=None, alias="primaryLanguage")
    url: str
    updated_at: datetime = Field(alias="updatedAt")


class Viewer(_GraphQLModel):
    """The authenticated user's own profile."""

    login: str
    name: str | None = None
    email: str | None = None
    avatar_url: str | None = Field(default=None, alias="avatarUrl")
    bio: str | None = None
    location: str | None = None
    company: str | None = None
    created_at: datetime = Field(alias="createdAt")
    followers_count: int = 0
    following_count: int = 0
    repositories: tuple[Repository, ...] = ()

    @property
    def display_name(self) -> str:
        """Name to show, falling back to the login handle."""
        return self.name or self.login

    @classmethod
    def from_graphql(cls, payload: dict) -> "Viewer":
        """Build a viewer from the ``data.viewer`` object of the query response.

        Connection wrappers (``followers { totalCount }``,
        ``repositories { nodes }``) are flattened here.
        """
        data = dict(payload)
        data["followers_count"] = (data.pop("followers", None) or {}).get("totalCount", 0)
        data["following_count"] = (data.pop("following", None) or {}).get("totalCount", 0)
        data["repositories"] = tuple(
            (data.pop("repositories", None) or {}).get("nodes") or ()
        )
        return cls.model_validate(data)
