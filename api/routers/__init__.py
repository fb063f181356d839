"""
Router package for the Capture Records API.

This package contains all API routers organized by domain:
- health: Liveness endpoint
- records: Record listing, metadata and content endpoints
"""

from api.routers.health import router as health_router
from api.routers.records import router as records_router

__all__ = [
    "health_router",
    "records_router",
]
