"""
API Package - FastAPI Routers

Exports all API routers for main app registration.
"""

from app.api.recommendations import router as recommendations_router

# API Version
API_VERSION = "1.0.0"

__all__ = [
    "recommendations_router",
    "API_VERSION",
]
