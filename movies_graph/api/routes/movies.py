"""
Movies API Routes

영화 카탈로그 엔드포인트

엔드포인트:
1. GET  /movies/{title}        - 영화 조회 (출연진 포함)
2. POST /movies/{title}/vote   - 영화 투표
3. GET  /search?q=             - 제목 검색
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from movies_graph.api.schemas import MovieListResponse, MovieResponse, VoteResponse
from movies_graph.dependencies import get_neo4j_repository
from movies_graph.domain.validators import validate_title
from movies_graph.repositories.neo4j_repository import Neo4jRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["movies"])


@router.get("/movies/{title}", response_model=MovieResponse)
async def get_movie(
    title: str,
    repo: Annotated[Neo4jRepository, Depends(get_neo4j_repository)],
) -> MovieResponse:
    """제목으로 영화 조회"""
    movie = await repo.find_by_title(title)
    return MovieResponse.from_movie(movie)


@router.post("/movies/{title}/vote", response_model=VoteResponse)
async def vote_movie(
    title: str,
    repo: Annotated[Neo4jRepository, Depends(get_neo4j_repository)],
) -> VoteResponse:
    """영화 투표 (votes + 1)"""
    validated_title = validate_title(title)
    updates = await repo.vote_by_title(validated_title)
    return VoteResponse(title=validated_title, updates=updates)


@router.get("/search", response_model=MovieListResponse)
async def search_movies(
    repo: Annotated[Neo4jRepository, Depends(get_neo4j_repository)],
    q: str = Query(..., description="제목 검색어 (부분 일치)"),
) -> MovieListResponse:
    """제목 부분 일치 검색"""
    logger.info("Search request received (length=%d)", len(q))
    movies = await repo.search(q)
    return MovieListResponse(
        movies=[MovieResponse.from_movie(m) for m in movies],
        count=len(movies),
    )
