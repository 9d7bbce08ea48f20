"""API routers for the REST API."""

from cabineato.web.routers.assemblies import router as assemblies_router
from cabineato.web.routers.validate import router as validate_router

__all__ = ["assemblies_router", "validate_router"]
