"""
API Routers package.

Each module contains a FastAPI router for a specific domain.
"""

from .facets import router as facets_router

__all__ = [
    "facets_router",
]
