"""
Graph Utilities

그래프 시각화 응답 변환 유틸리티
"""

from typing import Any

from movies_graph.api.schemas.visualization import (
    D3GraphResponse,
    D3LinkResponse,
    D3NodeResponse,
    GraphEdge,
    GraphNode,
    RelatedGraphResponse,
)
from movies_graph.domain.models import D3Graph
from movies_graph.repositories.neo4j_types import RelatedGraph


def sanitize_props(props: dict[str, Any]) -> dict[str, Any]:
    """Neo4j 속성을 JSON 직렬화 가능한 형태로 변환"""
    sanitized: dict[str, Any] = {}
    for key, value in props.items():
        if isinstance(value, (str, int, float, bool, type(None))):
            sanitized[key] = value
        elif hasattr(value, "isoformat"):
            sanitized[key] = value.isoformat()
        elif isinstance(value, list):
            sanitized[key] = [
                v.isoformat() if hasattr(v, "isoformat") else v for v in value
            ]
        elif isinstance(value, dict):
            sanitized[key] = sanitize_props(value)
        else:
            sanitized[key] = str(value)
    return sanitized


def to_related_graph_response(anchor_id: int, graph: RelatedGraph) -> RelatedGraphResponse:
    """RelatedGraph → API 응답"""
    nodes = [
        GraphNode(
            id=node.id,
            labels=list(node.labels),
            properties=sanitize_props(node.properties),
        )
        for node in graph.nodes
    ]
    edges = [
        GraphEdge(
            id=rel.id,
            type=rel.type,
            start_node_id=rel.start_node_id,
            end_node_id=rel.end_node_id,
            properties=sanitize_props(rel.properties),
        )
        for rel in graph.relationships
    ]
    return RelatedGraphResponse(
        anchor_id=anchor_id,
        nodes=nodes,
        relationships=edges,
        node_count=len(nodes),
        relationship_count=len(edges),
    )


def to_d3_graph_response(graph: D3Graph) -> D3GraphResponse:
    """D3Graph → API 응답"""
    return D3GraphResponse(
        nodes=[D3NodeResponse(title=n.title, label=n.label) for n in graph.nodes],
        links=[
            D3LinkResponse(source=link.source, target=link.target) for link in graph.links
        ],
    )
