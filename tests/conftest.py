"""
Test Configuration

테스트 공통 fixture 정의 - 모든 외부 의존성을 mock으로 대체합니다.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from movies_graph.config import Settings
from movies_graph.repositories.neo4j_types import (
    GraphEntity,
    GraphRelationship,
    TraversalRow,
)


@pytest.fixture
def mock_settings():
    """테스트용 Settings mock"""
    settings = MagicMock(spec=Settings)
    settings.neo4j_uri = "bolt://localhost:7687"
    settings.neo4j_user = "neo4j"
    settings.neo4j_password = "password"
    settings.neo4j_database = "movies"
    settings.neo4j_version = "5.20"
    settings.session_database = "movies"
    settings.neo4j_max_connection_pool_size = 10
    settings.neo4j_connection_timeout = 5.0
    settings.app_name = "Movies Graph Test"
    settings.app_version = "0.1.0"
    settings.d3_graph_default_limit = 100
    settings.log_level = "DEBUG"
    settings.log_format = "%(message)s"
    settings.cors_origins = ["http://localhost:3000"]
    settings.is_production = False
    settings.is_development = True
    return settings


@pytest.fixture
def mock_neo4j_client():
    """Neo4jClient mock"""
    client = AsyncMock()
    client.execute_query.return_value = []
    client.execute_update.return_value = {"properties_set": 0}
    client.health_check.return_value = {
        "connected": True,
        "uri": "bolt://localhost:7687",
        "database": "movies",
        "server_info": {"address": "localhost:7687", "agent": "Neo4j/5.20.0"},
        "error": None,
    }
    client.connect = AsyncMock()
    client.close = AsyncMock()
    return client


@pytest.fixture
def entity():
    """GraphEntity 팩토리: entity(1, "Person", name="Keanu")"""

    def _make(entity_id: int, *labels: str, **properties) -> GraphEntity:
        return GraphEntity(id=entity_id, labels=labels, properties=properties)

    return _make


@pytest.fixture
def relationship():
    """GraphRelationship 팩토리: relationship(10, "ACTED_IN", 1, 2)"""

    def _make(
        rel_id: int, rel_type: str, start_id: int, end_id: int, **properties
    ) -> GraphRelationship:
        return GraphRelationship(
            id=rel_id,
            type=rel_type,
            start_node_id=start_id,
            end_node_id=end_id,
            properties=properties,
        )

    return _make


@pytest.fixture
def matrix_rows(entity, relationship):
    """The Matrix(1) 앵커: Keanu(2) ACTED_IN, Lana(3) DIRECTED"""
    matrix = entity(1, "Movie", title="The Matrix", released=1999)
    keanu = entity(2, "Person", name="Keanu Reeves")
    lana = entity(3, "Person", name="Lana Wachowski")
    return [
        TraversalRow(
            start_node=matrix,
            relationship=relationship(10, "ACTED_IN", 2, 1, roles=["Neo"]),
            related_node=keanu,
        ),
        TraversalRow(
            start_node=matrix,
            relationship=relationship(11, "DIRECTED", 3, 1),
            related_node=lana,
        ),
    ]


@pytest.fixture
def traversal_records():
    """Neo4jTraversalRepository가 받는 원시 레코드 (execute_query 결과 형태)"""
    matrix = {"id": 1, "labels": ["Movie"], "properties": {"title": "The Matrix"}}
    return [
        {
            "startNode": matrix,
            "relationship": {
                "id": 10,
                "type": "ACTED_IN",
                "start_id": 2,
                "end_id": 1,
                "properties": {"roles": ["Neo"]},
            },
            "relatedNode": {
                "id": 2,
                "labels": ["Person"],
                "properties": {"name": "Keanu Reeves", "born": 1964},
            },
        },
        {
            "startNode": matrix,
            "relationship": {
                "id": 11,
                "type": "DIRECTED",
                "start_id": 3,
                "end_id": 1,
                "properties": {},
            },
            "relatedNode": {
                "id": 3,
                "labels": ["Person"],
                "properties": {"name": "Lana Wachowski"},
            },
        },
    ]
