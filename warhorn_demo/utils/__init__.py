"""Utility modules for the Warhorn demo application."""

from warhorn_demo.utils.logging import LogContext, get_logger, setup_logging

__all__ = [
    "LogContext",
    "get_logger",
    "setup_logging",
]
