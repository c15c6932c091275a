"""JSON API."""

from warhorn_demo.api.router import api_router

__all__ = ["api_router"]
