"""API module."""

from digest_server.api.routes import router

__all__ = ["router"]
