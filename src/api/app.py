"""FastAPI host application.

Serves the health check and hosts the NiceGUI chat page mounted by main.py.
Chat state never passes through HTTP routes: each browser page owns its own
controller.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src import __version__

logger = logging.getLogger(__name__)

SERVICE_NAME = "gemini-chat"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting Gemini Chat...")
    yield
    logger.info("Shutting down Gemini Chat...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Gemini Chat",
        description=(
            "Browser chat client that streams multi-turn replies from a hosted "
            "language model and renders them incrementally."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": SERVICE_NAME}

    return application


app = create_app()
