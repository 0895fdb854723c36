"""
Neo4j Traversal Repository - 이웃 탐색

책임:
- 앵커 노드에 직접 연결된 관계/노드 조회
- 드라이버 레코드를 GraphEntity/GraphRelationship 값 객체로 변환

노드/관계 id는 Cypher에서 정수 맵으로 직접 반환하므로
드라이버 객체 타입에 의존하지 않습니다.
"""

import logging
from typing import Any

from movies_graph.domain.exceptions import (
    DatabaseError,
    MalformedTraversalResult,
    TraversalError,
)
from movies_graph.infrastructure.neo4j_client import Neo4jClient
from movies_graph.repositories.neo4j_types import (
    GraphEntity,
    GraphRelationship,
    TraversalRow,
)

logger = logging.getLogger(__name__)

RELATED_QUERY = """
MATCH (startNode)-[relationship]-(relatedNode)
WHERE id(startNode) = $id
RETURN
    {id: id(startNode), labels: labels(startNode), properties: properties(startNode)}
        AS startNode,
    {
        id: id(relationship),
        type: type(relationship),
        start_id: id(startNode(relationship)),
        end_id: id(endNode(relationship)),
        properties: properties(relationship)
    } AS relationship,
    {id: id(relatedNode), labels: labels(relatedNode), properties: properties(relatedNode)}
        AS relatedNode
"""


def _require_int(value: Any, field_name: str) -> int:
    """정수 id 검증 (bool 제외)"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedTraversalResult(
            f"Field '{field_name}' must be an integer id, got {value!r}"
        )
    return value


def to_graph_entity(raw: dict[str, Any]) -> GraphEntity:
    """노드 맵 → GraphEntity"""
    try:
        return GraphEntity(
            id=_require_int(raw["id"], "node.id"),
            labels=tuple(raw.get("labels") or ()),
            properties=dict(raw.get("properties") or {}),
        )
    except (KeyError, TypeError) as e:
        raise MalformedTraversalResult(f"Invalid node record: {e}") from e


def to_graph_relationship(raw: dict[str, Any]) -> GraphRelationship:
    """관계 맵 → GraphRelationship"""
    try:
        return GraphRelationship(
            id=_require_int(raw["id"], "relationship.id"),
            type=str(raw["type"]),
            start_node_id=_require_int(raw["start_id"], "relationship.start_id"),
            end_node_id=_require_int(raw["end_id"], "relationship.end_id"),
            properties=dict(raw.get("properties") or {}),
        )
    except (KeyError, TypeError) as e:
        raise MalformedTraversalResult(f"Invalid relationship record: {e}") from e


def to_traversal_row(record: dict[str, Any]) -> TraversalRow:
    """탐색 레코드 → TraversalRow"""
    try:
        start, rel, related = (
            record["startNode"],
            record["relationship"],
            record["relatedNode"],
        )
    except (KeyError, TypeError) as e:
        raise MalformedTraversalResult(f"Traversal record is missing {e}") from e

    return TraversalRow(
        start_node=to_graph_entity(start),
        relationship=to_graph_relationship(rel),
        related_node=to_graph_entity(related),
    )


class Neo4jTraversalRepository:
    """이웃 탐색 전담 레포지토리 (Graph Query Executor)"""

    def __init__(self, client: Neo4jClient):
        self._client = client

    async def traverse(self, anchor_id: int) -> list[TraversalRow]:
        """
        앵커 노드에 연결된 (시작 노드, 관계, 연결 노드) 목록 조회

        존재하지 않는 앵커는 빈 리스트를 반환합니다.

        Raises:
            TraversalError: 연결 실패 또는 쿼리 실패
            MalformedTraversalResult: 레코드 필드 누락/타입 오류
        """
        try:
            records = await self._client.execute_query(RELATED_QUERY, {"id": anchor_id})
        except DatabaseError as e:
            logger.error(f"Traversal from node {anchor_id} failed: {e}")
            raise TraversalError(
                f"Failed to traverse from node {anchor_id}: {e.message}",
                anchor_id=anchor_id,
            ) from e

        rows = [to_traversal_row(record) for record in records]
        logger.debug(f"Traversal from node {anchor_id}: {len(rows)} rows")
        return rows
