"""FastAPI endpoints for the Omar's cousins chat.

Endpoints:
    - GET /health: Service health status
    - POST /api/omars-cousins: Ask the cousins a question
"""

from omars_cousins.api.app import app, create_app

__all__ = ["app", "create_app"]
