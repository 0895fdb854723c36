"""
애플리케이션 설정 모듈

Pydantic Settings를 활용한 환경변수 기반 설정 관리
- 타입 검증 자동화
- .env 파일 지원
- Neo4j 버전에 따른 세션 데이터베이스 선택
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# 프로젝트 루트 디렉토리 (movies_graph/config.py 기준으로 한 단계 상위)
PROJECT_ROOT = Path(__file__).parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"

# 멀티 데이터베이스를 지원하는 최소 Neo4j 메이저 버전
MULTI_DATABASE_MIN_MAJOR_VERSION = 4


class Settings(BaseSettings):
    """
    애플리케이션 전역 설정

    환경변수 또는 .env 파일에서 값을 로드합니다.
    """

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    # ============================================
    # 애플리케이션 설정
    # ============================================
    app_name: str = Field(default="Movies Graph API", description="애플리케이션 이름")
    app_version: str = Field(default="0.1.0", description="애플리케이션 버전")
    debug: bool = Field(default=False, description="디버그 모드")
    environment: str = Field(default="development", description="실행 환경")
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://localhost:8080",
        ],
        description="CORS 허용 오리진 목록",
    )

    # ============================================
    # Neo4j 설정
    # ============================================
    neo4j_uri: str = Field(
        default="bolt://localhost:7687",
        description="Neo4j Bolt URI",
    )
    neo4j_user: str = Field(
        default="neo4j",
        description="Neo4j 사용자명",
    )
    neo4j_password: str = Field(
        default="",
        description="Neo4j 비밀번호",
    )
    neo4j_database: str = Field(
        default="movies",
        description="Neo4j 데이터베이스 이름 (4.x 이상에서만 사용)",
    )
    neo4j_version: str = Field(
        default="",
        description="Neo4j 서버 버전 (예: '4.4', '5.20'). 비어 있으면 기본 데이터베이스 사용",
    )
    neo4j_max_connection_pool_size: int = Field(
        default=50,
        ge=1,
        le=100,
        description="Neo4j 커넥션 풀 최대 크기",
    )
    neo4j_connection_timeout: float = Field(
        default=30.0,
        ge=1.0,
        description="Neo4j 연결 타임아웃 (초)",
    )

    # ============================================
    # 영화 그래프 설정
    # ============================================
    d3_graph_default_limit: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="D3 그래프 기본 영화 수",
    )

    # ============================================
    # 로깅 설정
    # ============================================
    log_level: str = Field(
        default="INFO",
        description="로깅 레벨",
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="로그 포맷",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """로그 레벨 유효성 검사"""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper_v

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """환경 유효성 검사"""
        valid_envs = {"development", "staging", "production", "test"}
        lower_v = v.lower()
        if lower_v not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return lower_v

    @field_validator("neo4j_version")
    @classmethod
    def validate_neo4j_version(cls, v: str) -> str:
        """Neo4j 버전 형식 검사 (메이저 버전이 숫자여야 함)"""
        stripped = v.strip()
        if stripped and not stripped.split(".")[0].isdigit():
            raise ValueError(f"neo4j_version must start with a major version: '{v}'")
        return stripped

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """CORS 오리진 목록 검증"""
        if "*" in v and len(v) > 1:
            raise ValueError(
                "CORS origins cannot mix wildcard '*' with specific origins. "
                "Use either '*' alone or specific origin URLs."
            )
        return v

    @property
    def is_production(self) -> bool:
        """프로덕션 환경 여부"""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """개발 환경 여부"""
        return self.environment == "development"

    @property
    def session_database(self) -> str | None:
        """
        세션에 지정할 데이터베이스 이름

        Neo4j 4.x 이상만 멀티 데이터베이스를 지원하므로,
        버전이 비어 있거나 3.x 이하이면 None (서버 기본 데이터베이스)을 반환합니다.
        """
        if not self.neo4j_version:
            return None
        major = int(self.neo4j_version.split(".")[0])
        if major < MULTI_DATABASE_MIN_MAJOR_VERSION:
            return None
        return self.neo4j_database

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """프로덕션 환경 필수 설정 검증"""
        if self.environment == "production":
            if not self.neo4j_password:
                raise ValueError(
                    "Production environment requires these settings: neo4j_password"
                )

            if "*" in self.cors_origins:
                logger.warning(
                    "CORS wildcard origin is enabled in production. "
                    "Restrict CORS_ORIGINS to known front-end hosts."
                )

        return self


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤 인스턴스 반환"""
    return Settings()
