"""FastAPI host for the chat client.

Endpoints:
    - GET /health: Service health status
    - /: NiceGUI chat page (mounted at startup)
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
