"""
Visualization API Schemas

그래프 시각화 API의 응답 스키마
- D3 포스 그래프 (배우-영화)
- 이웃 그래프 (노드/엣지)
"""

from typing import Any

from pydantic import BaseModel, Field


class D3NodeResponse(BaseModel):
    """D3 노드"""

    title: str = Field(..., description="영화 제목 또는 배우 이름")
    label: str = Field(..., description="노드 종류 (movie | actor)")


class D3LinkResponse(BaseModel):
    """D3 링크"""

    source: int = Field(..., description="배우 노드 인덱스")
    target: int = Field(..., description="영화 노드 인덱스")


class D3GraphResponse(BaseModel):
    """D3 포스 그래프 응답"""

    nodes: list[D3NodeResponse] = Field(default_factory=list)
    links: list[D3LinkResponse] = Field(default_factory=list)


class GraphNode(BaseModel):
    """그래프 노드"""

    id: int = Field(..., description="노드 id")
    labels: list[str] = Field(default_factory=list, description="노드 레이블")
    properties: dict[str, Any] = Field(default_factory=dict, description="노드 속성")


class GraphEdge(BaseModel):
    """그래프 엣지"""

    id: int = Field(..., description="관계 id")
    type: str = Field(..., description="관계 타입")
    start_node_id: int = Field(..., description="시작 노드 id")
    end_node_id: int = Field(..., description="끝 노드 id")
    properties: dict[str, Any] = Field(default_factory=dict, description="관계 속성")


class RelatedGraphResponse(BaseModel):
    """이웃 그래프 응답"""

    anchor_id: int = Field(..., description="탐색 시작 노드 id")
    nodes: list[GraphNode] = Field(default_factory=list)
    relationships: list[GraphEdge] = Field(default_factory=list)
    node_count: int = Field(default=0)
    relationship_count: int = Field(default=0)
