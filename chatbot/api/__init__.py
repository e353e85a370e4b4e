"""FastAPI shell for the chat widget.

Endpoints:
    - GET /health: Service health status
    - GET /: Chat page (mounted from NiceGUI at startup)
"""

from chatbot.api.app import app, create_app

__all__ = ["app", "create_app"]
