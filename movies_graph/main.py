"""
Movies Graph API

FastAPI 애플리케이션 진입점
Neo4j 영화 카탈로그 조회 및 그래프 시각화 데이터 제공
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from movies_graph.api import graph_router, movies_router
from movies_graph.config import get_settings
from movies_graph.domain.exceptions import (
    DatabaseConnectionError,
    EntityNotFoundError,
    MoviesGraphError,
    TraversalError,
    ValidationError,
)
from movies_graph.infrastructure.neo4j_client import Neo4jClient
from movies_graph.repositories import Neo4jRepository
from movies_graph.services.related_graph_builder import RelatedEntityGraphBuilder

# 로깅 설정
settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format=settings.log_format,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    애플리케이션 라이프사이클 관리

    시작 시: Neo4j 연결, Repository/Builder 초기화
    종료 시: 리소스 정리
    """
    logger.info("Starting Movies Graph API...")

    # Neo4j 클라이언트 초기화 (버전에 따라 세션 데이터베이스 결정)
    neo4j_client = Neo4jClient(
        uri=settings.neo4j_uri,
        user=settings.neo4j_user,
        password=settings.neo4j_password,
        database=settings.session_database,
        max_connection_pool_size=settings.neo4j_max_connection_pool_size,
        connection_timeout=settings.neo4j_connection_timeout,
    )
    await neo4j_client.connect()
    logger.info("Neo4j client connected")

    # Repository / Service 초기화
    neo4j_repo = Neo4jRepository(neo4j_client)
    related_graph_builder = RelatedEntityGraphBuilder(neo4j_repo)
    logger.info("Repositories initialized")

    # app.state에 저장
    app.state.neo4j_client = neo4j_client
    app.state.neo4j_repo = neo4j_repo
    app.state.related_graph_builder = related_graph_builder

    yield

    # 종료 시 리소스 정리
    logger.info("Shutting down Movies Graph API...")

    if hasattr(app.state, "neo4j_client") and app.state.neo4j_client:
        await app.state.neo4j_client.close()
        logger.info("Neo4j connection closed")


# FastAPI 앱 생성
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Neo4j 영화 카탈로그 조회 및 그래프 시각화 API",
    lifespan=lifespan,
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)


# ============================================
# 글로벌 예외 핸들러
# ============================================


@app.exception_handler(EntityNotFoundError)
async def entity_not_found_handler(
    request: Request, exc: EntityNotFoundError
) -> JSONResponse:
    """엔티티를 찾을 수 없을 때 404 응답"""
    return JSONResponse(
        status_code=404,
        content={"detail": {"message": exc.message, "code": exc.code}},
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """입력 검증 실패 시 400 응답"""
    return JSONResponse(
        status_code=400,
        content={"detail": {"message": exc.message, "code": exc.code}},
    )


@app.exception_handler(TraversalError)
@app.exception_handler(DatabaseConnectionError)
async def unavailable_error_handler(
    request: Request, exc: MoviesGraphError
) -> JSONResponse:
    """데이터베이스 연결/탐색 실패 시 503 응답"""
    logger.error(f"{type(exc).__name__}: {exc.message}")
    return JSONResponse(
        status_code=503,
        content={"detail": {"message": exc.message, "code": exc.code}},
    )


@app.exception_handler(MoviesGraphError)
async def movies_graph_error_handler(
    request: Request, exc: MoviesGraphError
) -> JSONResponse:
    """기타 도메인 예외 시 500 응답"""
    settings = get_settings()
    if settings.is_production:
        logger.error(f"MoviesGraphError: {exc.code}")
    else:
        logger.error(f"MoviesGraphError: {exc.message}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": {"message": exc.message, "code": exc.code}},
    )


# 라우터 등록
app.include_router(movies_router)
app.include_router(graph_router)


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "movies_graph.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )
