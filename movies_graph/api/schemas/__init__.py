"""
API Schemas Package
"""

from movies_graph.api.schemas.health import HealthResponse
from movies_graph.api.schemas.movies import (
    CastMemberResponse,
    MovieListResponse,
    MovieResponse,
    VoteResponse,
)
from movies_graph.api.schemas.visualization import (
    D3GraphResponse,
    D3LinkResponse,
    D3NodeResponse,
    GraphEdge,
    GraphNode,
    RelatedGraphResponse,
)

__all__ = [
    # Movies
    "CastMemberResponse",
    "MovieResponse",
    "MovieListResponse",
    "VoteResponse",
    # Visualization
    "D3NodeResponse",
    "D3LinkResponse",
    "D3GraphResponse",
    "GraphNode",
    "GraphEdge",
    "RelatedGraphResponse",
    # Health
    "HealthResponse",
]
