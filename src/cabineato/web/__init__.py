"""FastAPI REST API for cabinet assembly generation.

Usage:
    uvicorn cabineato.web:app --reload
"""

from cabineato.web.app import app, create_app

__all__ = ["app", "create_app"]
