"""
Repositories Package

데이터 접근 계층을 제공합니다.
"""

from movies_graph.repositories.neo4j_movie_repository import Neo4jMovieRepository
from movies_graph.repositories.neo4j_repository import Neo4jRepository
from movies_graph.repositories.neo4j_traversal_repository import (
    Neo4jTraversalRepository,
)
from movies_graph.repositories.neo4j_types import (
    GraphEntity,
    GraphRelationship,
    RelatedGraph,
    TraversalRow,
)

__all__ = [
    # Facade
    "Neo4jRepository",
    # Data classes
    "GraphEntity",
    "GraphRelationship",
    "RelatedGraph",
    "TraversalRow",
    # Sub-repositories
    "Neo4jMovieRepository",
    "Neo4jTraversalRepository",
]
