"""Main API router."""

from fastapi import APIRouter

from warhorn_demo.api.session import router as session_router

api_router = APIRouter(prefix="/api")

api_router.include_router(session_router, prefix="/session", tags=["session"])
