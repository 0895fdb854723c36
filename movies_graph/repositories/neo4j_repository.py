"""
Neo4j Repository - Facade

영화 카탈로그와 이웃 탐색 메서드를 하나의 진입점으로 제공하며
내부적으로 2개의 서브 레포지토리에 위임합니다.
"""

from movies_graph.domain.models import D3Graph, Movie
from movies_graph.infrastructure.neo4j_client import Neo4jClient
from movies_graph.repositories.neo4j_movie_repository import Neo4jMovieRepository
from movies_graph.repositories.neo4j_traversal_repository import (
    Neo4jTraversalRepository,
)
from movies_graph.repositories.neo4j_types import TraversalRow


class Neo4jRepository:
    """
    Neo4j 영화 그래프 Repository - Facade

    사용 예시:
        repo = Neo4jRepository(neo4j_client)
        movie = await repo.find_by_title("The Matrix")
        rows = await repo.traverse(anchor_id=123)
    """

    def __init__(self, client: Neo4jClient):
        self._client = client

        # 서브 레포지토리 초기화
        self._movies = Neo4jMovieRepository(client)
        self._traversal = Neo4jTraversalRepository(client)

    # ── Movie Repository 위임 ─────────────────────────────────

    async def find_by_title(self, title: str) -> Movie:
        return await self._movies.find_by_title(title)

    async def vote_by_title(self, title: str) -> int:
        return await self._movies.vote_by_title(title)

    async def search(self, search: str) -> list[Movie]:
        return await self._movies.search(search)

    async def fetch_d3_graph(self, limit: int = 100) -> D3Graph:
        return await self._movies.fetch_d3_graph(limit)

    # ── Traversal Repository 위임 ─────────────────────────────

    async def traverse(self, anchor_id: int) -> list[TraversalRow]:
        return await self._traversal.traverse(anchor_id)
