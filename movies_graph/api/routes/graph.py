"""
Graph API Routes

그래프 시각화 및 상태 엔드포인트
- D3 포스 그래프 (배우-영화)
- 이웃 그래프 (노드/엣지, 노드 id 기준 중복 제거)
- 헬스체크
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from movies_graph.api.schemas import (
    D3GraphResponse,
    HealthResponse,
    RelatedGraphResponse,
)
from movies_graph.api.utils.graph_utils import (
    to_d3_graph_response,
    to_related_graph_response,
)
from movies_graph.config import Settings, get_settings
from movies_graph.dependencies import (
    get_neo4j_client,
    get_neo4j_repository,
    get_related_graph_builder,
)
from movies_graph.infrastructure.neo4j_client import Neo4jClient
from movies_graph.repositories.neo4j_repository import Neo4jRepository
from movies_graph.services.related_graph_builder import RelatedEntityGraphBuilder

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["graph"])


@router.get("/graph", response_model=D3GraphResponse)
async def get_d3_graph(
    settings: Annotated[Settings, Depends(get_settings)],
    repo: Annotated[Neo4jRepository, Depends(get_neo4j_repository)],
    limit: int | None = Query(default=None, ge=1, le=1000, description="최대 영화 수"),
) -> D3GraphResponse:
    """배우-영화 D3 포스 그래프"""
    graph = await repo.fetch_d3_graph(limit or settings.d3_graph_default_limit)
    return to_d3_graph_response(graph)


@router.get("/related/{node_id}", response_model=RelatedGraphResponse)
async def get_related(
    node_id: int,
    builder: Annotated[RelatedEntityGraphBuilder, Depends(get_related_graph_builder)],
) -> RelatedGraphResponse:
    """
    이웃 그래프

    노드에 직접 연결된 노드와 관계를 반환합니다.
    존재하지 않는 노드 id는 빈 그래프를 반환합니다.
    """
    graph = await builder.build(node_id)
    logger.info(
        "Related graph built (node=%d, nodes=%d, relationships=%d)",
        node_id,
        len(graph.nodes),
        len(graph.relationships),
    )
    return to_related_graph_response(node_id, graph)


@router.get("/health", response_model=HealthResponse)
async def health(
    settings: Annotated[Settings, Depends(get_settings)],
    neo4j_client: Annotated[Neo4jClient, Depends(get_neo4j_client)],
) -> HealthResponse:
    """
    헬스체크

    서비스 및 Neo4j 연결 상태를 확인합니다.
    """
    health_info = await neo4j_client.health_check()

    return HealthResponse(
        status="healthy" if health_info["connected"] else "degraded",
        version=settings.app_version,
        neo4j_connected=health_info["connected"],
        neo4j_info=health_info.get("server_info"),
    )
