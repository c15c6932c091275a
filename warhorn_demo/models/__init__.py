"""Provider data models."""

from warhorn_demo.models.viewer import Language, Repository, Viewer

__all__ = [
    "Language",
    "Repository",
    "Viewer",
]
