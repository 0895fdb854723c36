"""
Health API 스키마
"""

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """헬스체크 응답"""

    status: str = Field(description="서비스 상태")
    version: str = Field(description="API 버전")
    neo4j_connected: bool = Field(description="Neo4j 연결 상태")
    neo4j_info: dict[str, Any] | None = Field(
        default=None, description="Neo4j 서버 정보"
    )
