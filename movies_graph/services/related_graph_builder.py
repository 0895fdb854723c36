"""
RelatedEntityGraphBuilder - 이웃 그래프 구성

앵커 엔티티에 직접 연결된 노드와 관계를 하나의 RelatedGraph로 합칩니다.
- 노드는 id 기준으로 중복 제거 (최초 등장 우선)
- 관계는 중복 제거 없이 도착 순서대로 유지
- 관계의 양 끝이 같은 행의 노드가 아니면 즉시 실패
"""

import logging
from collections.abc import Iterable
from typing import Protocol

from movies_graph.domain.exceptions import MalformedTraversalResult
from movies_graph.repositories.neo4j_types import (
    GraphEntity,
    GraphRelationship,
    RelatedGraph,
    TraversalRow,
)

logger = logging.getLogger(__name__)


class GraphQueryExecutor(Protocol):
    """앵커 id로 (시작 노드, 관계, 연결 노드) 행을 반환하는 탐색 실행기"""

    async def traverse(self, anchor_id: int) -> Iterable[TraversalRow]: ...


class RelatedEntityGraphBuilder:
    """
    이웃 그래프 빌더

    호출마다 독립적인 누산기를 사용하므로 동시 호출 간 조정이 필요 없습니다.

    사용 예시:
        builder = RelatedEntityGraphBuilder(Neo4jTraversalRepository(client))
        graph = await builder.build(42)
    """

    def __init__(self, executor: GraphQueryExecutor):
        self._executor = executor

    async def build(self, anchor_id: int) -> RelatedGraph:
        """
        앵커 엔티티의 이웃 그래프 생성

        Args:
            anchor_id: 탐색 시작 노드 id

        Returns:
            노드(id 유일)와 관계(입력 행 수와 동일)로 구성된 RelatedGraph.
            존재하지 않는 앵커는 빈 그래프.

        Raises:
            TraversalError: 실행기 실패 (그대로 전파)
            MalformedTraversalResult: 관계 끝점이 행의 노드와 불일치
        """
        rows = await self._executor.traverse(anchor_id)

        nodes: dict[int, GraphEntity] = {}
        relationships: list[GraphRelationship] = []

        for row in rows:
            nodes.setdefault(row.start_node.id, row.start_node)
            nodes.setdefault(row.related_node.id, row.related_node)
            _check_endpoints(row)
            relationships.append(row.relationship)

        logger.debug(
            f"Related graph for node {anchor_id}: "
            f"{len(nodes)} nodes, {len(relationships)} relationships"
        )
        return RelatedGraph(nodes=tuple(nodes.values()), relationships=tuple(relationships))


def _check_endpoints(row: TraversalRow) -> None:
    """관계의 start/end id가 모두 같은 행의 노드 id 중 하나인지 확인"""
    rel = row.relationship
    row_ids = {row.start_node.id, row.related_node.id}
    for endpoint in (rel.start_node_id, rel.end_node_id):
        if endpoint not in row_ids:
            raise MalformedTraversalResult(
                f"Relationship {rel.id} ({rel.type}) references node {endpoint}, "
                f"which is not one of its traversal endpoints {sorted(row_ids)}",
                relationship_id=rel.id,
            )
