"""
API Package
"""

from .routes.graph import router as graph_router
from .routes.movies import router as movies_router

__all__ = [
    "movies_router",
    "graph_router",
]
