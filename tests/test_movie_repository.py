"""
Neo4jMovieRepository 테스트

영화 조회/투표/검색/D3 그래프 매핑을 mock 클라이언트로 확인합니다.
"""

import pytest

from movies_graph.domain.exceptions import (
    DatabaseError,
    EntityNotFoundError,
    QueryExecutionError,
    ValidationError,
)
from movies_graph.domain.models import CastMember, D3Link, D3Node
from movies_graph.repositories.neo4j_movie_repository import (
    Neo4jMovieRepository,
    build_d3_graph,
)


@pytest.fixture
def repo(mock_neo4j_client):
    return Neo4jMovieRepository(mock_neo4j_client)


class TestFindByTitle:
    """제목 조회"""

    async def test_maps_movie_and_cast(self, repo, mock_neo4j_client):
        mock_neo4j_client.execute_query.return_value = [
            {
                "title": "The Matrix",
                "released": 1999,
                "tagline": "Welcome to the Real World",
                "votes": 3,
                "cast": [
                    {"name": "Keanu Reeves", "job": "acted", "role": "Neo"},
                    {"name": "Lana Wachowski", "job": "directed", "role": None},
                ],
            }
        ]

        movie = await repo.find_by_title("  The Matrix ")

        args, _ = mock_neo4j_client.execute_query.call_args
        assert args[1] == {"title": "The Matrix"}
        assert movie.title == "The Matrix"
        assert movie.released == 1999
        assert movie.votes == 3
        assert movie.cast == (
            CastMember(name="Keanu Reeves", job="acted", role="Neo"),
            CastMember(name="Lana Wachowski", job="directed", role=""),
        )

    async def test_movie_without_people_has_empty_cast(self, repo, mock_neo4j_client):
        """OPTIONAL MATCH 빈 행(name=null)은 제외"""
        mock_neo4j_client.execute_query.return_value = [
            {"title": "Lonely", "cast": [{"name": None, "job": None, "role": None}]}
        ]

        movie = await repo.find_by_title("Lonely")

        assert movie.cast == ()

    async def test_unknown_title_raises_not_found(self, repo, mock_neo4j_client):
        mock_neo4j_client.execute_query.return_value = []

        with pytest.raises(EntityNotFoundError) as exc_info:
            await repo.find_by_title("Nope")

        assert exc_info.value.entity_type == "Movie"
        assert exc_info.value.entity_id == "Nope"

    async def test_blank_title_is_rejected(self, repo, mock_neo4j_client):
        with pytest.raises(ValidationError):
            await repo.find_by_title("   ")
        mock_neo4j_client.execute_query.assert_not_awaited()

    async def test_database_error_is_wrapped(self, repo, mock_neo4j_client):
        mock_neo4j_client.execute_query.side_effect = DatabaseError("boom")

        with pytest.raises(QueryExecutionError):
            await repo.find_by_title("The Matrix")


class TestVoteByTitle:
    """투표"""

    async def test_returns_properties_set(self, repo, mock_neo4j_client):
        mock_neo4j_client.execute_update.return_value = {
            "properties_set": 1,
            "nodes_created": 0,
        }

        assert await repo.vote_by_title("The Matrix") == 1

        args, _ = mock_neo4j_client.execute_update.call_args
        assert "coalesce(m.votes, 0) + 1" in args[0]
        assert args[1] == {"title": "The Matrix"}

    async def test_unknown_title_returns_zero(self, repo, mock_neo4j_client):
        mock_neo4j_client.execute_update.return_value = {"properties_set": 0}

        assert await repo.vote_by_title("Nope") == 0


class TestSearch:
    """검색"""

    async def test_maps_results_with_missing_votes(self, repo, mock_neo4j_client):
        mock_neo4j_client.execute_query.return_value = [
            {"title": "The Matrix", "released": 1999, "tagline": "t1", "votes": 5},
            {"title": "The Matrix Reloaded", "released": 2003, "tagline": None, "votes": None},
        ]

        movies = await repo.search("matrix")

        assert [m.title for m in movies] == ["The Matrix", "The Matrix Reloaded"]
        assert movies[1].votes is None
        assert movies[1].cast == ()

    async def test_empty_search_is_rejected(self, repo):
        with pytest.raises(ValidationError):
            await repo.search("")

    async def test_too_long_search_is_rejected(self, repo):
        with pytest.raises(ValidationError):
            await repo.search("x" * 201)


class TestD3Graph:
    """D3 포스 그래프"""

    def test_shared_actor_appears_once(self):
        """두 영화에 출연한 배우는 노드 하나, 링크 둘"""
        graph = build_d3_graph(
            [
                {"title": "The Matrix", "cast": ["Carrie-Anne Moss", "Keanu Reeves"]},
                {"title": "John Wick", "cast": ["Keanu Reeves"]},
            ]
        )

        assert graph.nodes == (
            D3Node(title="The Matrix", label="movie"),
            D3Node(title="Carrie-Anne Moss", label="actor"),
            D3Node(title="Keanu Reeves", label="actor"),
            D3Node(title="John Wick", label="movie"),
        )
        assert graph.links == (
            D3Link(source=1, target=0),
            D3Link(source=2, target=0),
            D3Link(source=2, target=3),
        )

    def test_links_reference_valid_indexes(self):
        graph = build_d3_graph(
            [{"title": f"M{i}", "cast": ["A", "B", f"C{i}"]} for i in range(5)]
        )
        assert len(graph.nodes) == len(set(graph.nodes))
        for link in graph.links:
            assert graph.nodes[link.source].label == "actor"
            assert graph.nodes[link.target].label == "movie"

    async def test_fetch_passes_limit(self, repo, mock_neo4j_client):
        mock_neo4j_client.execute_query.return_value = [
            {"title": "The Matrix", "cast": ["Keanu Reeves"]}
        ]

        graph = await repo.fetch_d3_graph(limit=10)

        args, _ = mock_neo4j_client.execute_query.call_args
        assert args[1] == {"limit": 10}
        assert len(graph.nodes) == 2

    @pytest.mark.parametrize("limit", [0, -1])
    async def test_invalid_limit_is_rejected(self, repo, limit):
        with pytest.raises(ValidationError):
            await repo.fetch_d3_graph(limit=limit)
