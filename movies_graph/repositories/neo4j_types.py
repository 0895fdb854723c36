"""
Neo4j Repository 공유 데이터 타입

그래프 탐색 결과를 표현하는 불변 값 객체.
드라이버 객체는 레포지토리 경계에서 이 타입들로 변환되며,
순환 import를 방지하기 위해 독립 모듈로 분리.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class GraphEntity:
    """그래프 노드 (Neo4j vertex)"""

    id: int
    labels: tuple[str, ...] = ()
    properties: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class GraphRelationship:
    """그래프 관계 (방향 있음, 탐색 시에는 무방향으로 취급)"""

    id: int
    type: str
    start_node_id: int
    end_node_id: int
    properties: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TraversalRow:
    """탐색 결과 한 건: (시작 노드, 관계, 연결된 노드)"""

    start_node: GraphEntity
    relationship: GraphRelationship
    related_node: GraphEntity


@dataclass(frozen=True, slots=True)
class RelatedGraph:
    """앵커 엔티티의 이웃 그래프 (노드는 id 기준 유일)"""

    nodes: tuple[GraphEntity, ...] = ()
    relationships: tuple[GraphRelationship, ...] = ()

    @property
    def node_ids(self) -> list[int]:
        return [node.id for node in self.nodes]

    @property
    def is_empty(self) -> bool:
        return not self.nodes and not self.relationships
