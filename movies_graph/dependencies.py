"""
FastAPI 의존성 주입 모듈

FastAPI의 Depends 패턴을 활용한 의존성 주입을 관리합니다.

의존성 흐름:
    Settings -> Neo4jClient -> Neo4jRepository -> RelatedEntityGraphBuilder
"""

from fastapi import Request

from movies_graph.infrastructure.neo4j_client import Neo4jClient
from movies_graph.repositories.neo4j_repository import Neo4jRepository
from movies_graph.services.related_graph_builder import RelatedEntityGraphBuilder

# ============================================
# Infrastructure Layer 의존성
# ============================================


def get_neo4j_client(request: Request) -> Neo4jClient:
    """Neo4j 클라이언트 의존성 주입"""
    return request.app.state.neo4j_client


# ============================================
# Repository Layer 의존성
# ============================================


def get_neo4j_repository(request: Request) -> Neo4jRepository:
    """Neo4j Repository 의존성 주입"""
    return request.app.state.neo4j_repo


# ============================================
# Service 의존성
# ============================================


def get_related_graph_builder(request: Request) -> RelatedEntityGraphBuilder:
    """RelatedEntityGraphBuilder 의존성 주입"""
    return request.app.state.related_graph_builder
