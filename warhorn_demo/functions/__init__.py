"""Serverless-style request handlers that hold server-only secrets."""

from warhorn_demo.functions.exchange_token import method_not_allowed_handler
from warhorn_demo.functions.exchange_token import router as exchange_token_router

__all__ = ["exchange_token_router", "method_not_allowed_handler"]
