"""
Digest Server - Main Application Entry Point

Serves a single token read from a local key=value file:
- /api/token and /api/env-info JSON endpoints
- Landing page at /
- Static files from the working directory
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI

from digest_server import __version__
from digest_server.config import Settings, get_settings
from digest_server.api import router
from digest_server.envfile import read_env_file
from digest_server.static import PublicStaticFiles


def setup_logging(settings: Optional[Settings] = None):
    """Configure structured logging."""
    settings = settings or get_settings()

    # Set log level
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer() if sys.stderr.isatty() else structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure root logger; basicConfig is a no-op once handlers exist
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger().setLevel(log_level)


LOOPBACK_HOSTS = ("127.0.0.1", "::1", "0.0.0.0", "::", "localhost")


def server_url(settings: Settings) -> str:
    """URL to open in a browser for the configured bind address."""
    host = "localhost" if settings.api_host in LOOPBACK_HOSTS else settings.api_host
    if ":" in host:
        host = f"[{host}]"
    return f"http://{host}:{settings.api_port}"


def log_token_status(settings: Settings) -> bool:
    """Log whether the token is available. Returns True if it is."""
    logger = structlog.get_logger()
    file_name = settings.env_file_path.name

    env_vars = read_env_file(settings.env_file_path)
    if env_vars and env_vars.get(settings.token_key):
        logger.info(f"Found {settings.token_key} in {file_name} file")
        return True

    logger.warning(
        f"No {file_name} file or {settings.token_key} found",
        env_file=str(settings.env_file_path)
    )
    logger.warning(f"Create a {file_name} file with: {settings.token_key}=your_token_here")
    return False


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for the given settings."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger = structlog.get_logger()

        logger.info(f"Digest server running at {server_url(settings)}")
        logger.info("Open your browser and navigate to the URL above")
        log_token_status(settings)

        yield

        logger.info("Digest server stopped")

    app = FastAPI(
        title="Digest Server",
        description="Local server exposing the Readwise token from a .env file",
        version=__version__,
        lifespan=lifespan
    )

    app.dependency_overrides[get_settings] = lambda: settings

    # API routes first, static files catch everything else
    app.include_router(router)
    app.mount("/", PublicStaticFiles(directory=settings.static_path), name="static")

    return app


def run():
    """Start the server with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings)

    uvicorn.run(
        create_app(settings),
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
