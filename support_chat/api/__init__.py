"""FastAPI endpoints for the support chat.

Endpoints:
    - GET /health: Service health status
    - POST /api/query: Knowledge-grounded answer to a single question
"""

from support_chat.api.app import app, create_app

__all__ = ["app", "create_app"]
