"""Server-rendered pages."""

from warhorn_demo.web.router import web_router

__all__ = ["web_router"]
