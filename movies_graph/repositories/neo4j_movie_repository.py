"""
Neo4j Movie Repository - 영화 카탈로그 조회/투표

책임:
- 제목으로 영화 및 출연진 조회
- 영화 투표 (votes 증가)
- 제목 부분 일치 검색
- 배우-영화 D3 포스 그래프 생성
"""

import logging
from typing import Any

from movies_graph.domain.exceptions import (
    DatabaseError,
    EntityNotFoundError,
    QueryExecutionError,
)
from movies_graph.domain.models import CastMember, D3Graph, D3Link, D3Node, Movie
from movies_graph.domain.validators import (
    validate_limit,
    validate_search_term,
    validate_title,
)
from movies_graph.infrastructure.neo4j_client import Neo4jClient

logger = logging.getLogger(__name__)

D3_MOVIE_LABEL = "movie"
D3_ACTOR_LABEL = "actor"


class Neo4jMovieRepository:
    """영화 카탈로그 전담 레포지토리"""

    def __init__(self, client: Neo4jClient):
        self._client = client

    async def find_by_title(self, title: str) -> Movie:
        """제목으로 영화 조회 (출연진 포함)"""
        validated_title = validate_title(title)

        query = """
        MATCH (movie:Movie {title: $title})
        OPTIONAL MATCH (movie)<-[r]-(person:Person)
        RETURN movie.title AS title,
               movie.released AS released,
               movie.tagline AS tagline,
               movie.votes AS votes,
               collect({
                   name: person.name,
                   job: head(split(toLower(type(r)), '_')),
                   role: reduce(acc = '', role IN r.roles |
                         acc + CASE WHEN acc = '' THEN '' ELSE ', ' END + role)
               }) AS cast
        """

        try:
            results = await self._client.execute_query(query, {"title": validated_title})
        except DatabaseError as e:
            logger.error(f"Failed to find movie '{validated_title}': {e}")
            raise QueryExecutionError(f"Failed to find movie: {e}", query=query) from e

        if not results:
            raise EntityNotFoundError("Movie", validated_title)

        r = results[0]
        return Movie(
            title=r["title"],
            released=r.get("released"),
            tagline=r.get("tagline"),
            votes=r.get("votes"),
            cast=_map_cast(r.get("cast") or []),
        )

    async def vote_by_title(self, title: str) -> int:
        """
        영화 투표

        Returns:
            변경된 속성 수 (존재하지 않는 제목이면 0)
        """
        validated_title = validate_title(title)

        query = """
        MATCH (m:Movie {title: $title})
        SET m.votes = coalesce(m.votes, 0) + 1
        """

        try:
            counters = await self._client.execute_update(
                query, {"title": validated_title}
            )
        except DatabaseError as e:
            logger.error(f"Failed to vote for movie '{validated_title}': {e}")
            raise QueryExecutionError(f"Failed to vote: {e}", query=query) from e

        updates = counters.get("properties_set", 0)
        logger.info(f"Vote recorded for '{validated_title}': {updates} properties set")
        return updates

    async def search(self, search: str) -> list[Movie]:
        """제목 부분 일치 검색 (대소문자 무시)"""
        validated_search = validate_search_term(search)

        query = """
        MATCH (movie:Movie)
        WHERE toLower(movie.title) CONTAINS toLower($title)
        RETURN movie.title AS title,
               movie.released AS released,
               movie.tagline AS tagline,
               movie.votes AS votes
        ORDER BY movie.title
        """

        try:
            results = await self._client.execute_query(
                query, {"title": validated_search}
            )
        except DatabaseError as e:
            logger.error(f"Failed to search movies for '{validated_search}': {e}")
            raise QueryExecutionError(f"Failed to search movies: {e}", query=query) from e

        return [
            Movie(
                title=r["title"],
                released=r.get("released"),
                tagline=r.get("tagline"),
                votes=r.get("votes"),
            )
            for r in results
        ]

    async def fetch_d3_graph(self, limit: int = 100) -> D3Graph:
        """
        배우-영화 포스 그래프 생성

        영화마다 노드 하나, 배우는 여러 영화에 출연해도 노드 하나.
        링크는 (배우 인덱스 → 영화 인덱스).
        """
        validated_limit = validate_limit(limit)

        query = """
        MATCH (m:Movie)<-[:ACTED_IN]-(p:Person)
        WITH m, p
        ORDER BY m.title, p.name
        RETURN m.title AS title, collect(p.name) AS cast
        LIMIT $limit
        """

        try:
            results = await self._client.execute_query(query, {"limit": validated_limit})
        except DatabaseError as e:
            logger.error(f"Failed to fetch D3 graph: {e}")
            raise QueryExecutionError(f"Failed to fetch graph: {e}", query=query) from e

        return build_d3_graph(results)


def _map_cast(raw_cast: list[dict[str, Any]]) -> tuple[CastMember, ...]:
    """collect() 결과 → CastMember 튜플 (OPTIONAL MATCH 빈 행 제외)"""
    return tuple(
        CastMember(
            name=c["name"],
            job=c.get("job") or "",
            role=c.get("role") or "",
        )
        for c in raw_cast
        if c.get("name") is not None
    )


def build_d3_graph(records: list[dict[str, Any]]) -> D3Graph:
    """(title, cast) 레코드 → D3Graph"""
    nodes: list[D3Node] = []
    links: list[D3Link] = []
    index_of: dict[D3Node, int] = {}

    for record in records:
        movie = D3Node(title=record["title"], label=D3_MOVIE_LABEL)
        movie_index = index_of.get(movie)
        if movie_index is None:
            movie_index = len(nodes)
            index_of[movie] = movie_index
            nodes.append(movie)

        for actor_name in record.get("cast") or []:
            actor = D3Node(title=actor_name, label=D3_ACTOR_LABEL)
            actor_index = index_of.get(actor)
            if actor_index is None:
                actor_index = len(nodes)
                index_of[actor] = actor_index
                nodes.append(actor)
            links.append(D3Link(source=actor_index, target=movie_index))

    return D3Graph(nodes=tuple(nodes), links=tuple(links))
