"""
Neo4j 비동기 드라이버 래퍼

책임:
- Neo4j 드라이버 연결 관리 (연결 풀링)
- 비동기 세션 컨텍스트 제공 (세션 데이터베이스 선택)
- 읽기/쓰기 트랜잭션 실행
- 연결 상태 확인 (health check)
- 리소스 정리 (graceful shutdown)
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any
from urllib.parse import urlparse, urlunparse

from neo4j import (
    AsyncDriver,
    AsyncGraphDatabase,
    AsyncManagedTransaction,
    AsyncSession,
    basic_auth,
)
from neo4j.exceptions import AuthError, DriverError, Neo4jError, ServiceUnavailable

from movies_graph.domain.exceptions import (
    ConfigurationError,
    DatabaseAuthenticationError,
    DatabaseConnectionError,
    DatabaseError,
)

logger = logging.getLogger(__name__)

# execute_update가 반환하는 쓰기 카운터
UPDATE_COUNTERS = (
    "nodes_created",
    "nodes_deleted",
    "relationships_created",
    "relationships_deleted",
    "properties_set",
    "labels_added",
    "labels_removed",
)


def _serialize_value(value: Any) -> Any:
    """Neo4j 반환값을 JSON 직렬화 가능한 형태로 변환"""
    if value is None:
        return None

    if isinstance(value, list):
        return [_serialize_value(item) for item in value]
    elif isinstance(value, dict):
        return {k: _serialize_value(v) for k, v in value.items()}

    # Neo4j DateTime/Date/Time/Duration → ISO 문자열
    type_name = type(value).__name__
    if type_name in ("DateTime", "Date", "Time", "Duration"):
        if hasattr(value, "isoformat"):
            return value.isoformat()
        elif hasattr(value, "iso_format"):
            return value.iso_format()
        return str(value)

    return value


def _sanitize_uri(uri: str) -> str:
    """URI에서 비밀번호 제거 (로깅용)"""
    try:
        parsed = urlparse(uri)
        if parsed.password:
            netloc = f"{parsed.username}:***@{parsed.hostname}"
            if parsed.port:
                netloc += f":{parsed.port}"
            sanitized = parsed._replace(netloc=netloc)
            return urlunparse(sanitized)
    except ValueError:
        return uri.split("@")[-1] if "@" in uri else uri
    return uri


async def _collect_records(
    tx: AsyncManagedTransaction, query: str, params: dict[str, Any]
) -> list[dict[str, Any]]:
    """트랜잭션 함수: 쿼리 실행 후 직렬화된 레코드 리스트 반환"""
    result = await tx.run(query, params)
    records = []
    async for record in result:
        records.append({key: _serialize_value(record[key]) for key in record.keys()})
    return records


async def _collect_counters(
    tx: AsyncManagedTransaction, query: str, params: dict[str, Any]
) -> dict[str, int]:
    """트랜잭션 함수: 쿼리 실행 후 쓰기 카운터 반환"""
    result = await tx.run(query, params)
    summary = await result.consume()
    return {name: getattr(summary.counters, name) for name in UPDATE_COUNTERS}


class Neo4jClient:
    """Neo4j 비동기 드라이버 래퍼"""

    def __init__(
        self,
        uri: str,
        user: str,
        password: str,
        database: str | None = None,
        max_connection_pool_size: int = 50,
        connection_timeout: float = 30.0,
    ):
        if not uri:
            raise ConfigurationError("Neo4j URI must not be empty", config_key="neo4j_uri")

        self._uri = uri
        self._user = user
        self._password = password
        self._database = database
        self._max_connection_pool_size = max_connection_pool_size
        self._connection_timeout = connection_timeout

        self._driver: AsyncDriver | None = None

        logger.info(
            f"Neo4jClient initialized: uri={_sanitize_uri(uri)}, "
            f"database={database or '<default>'}, pool_size={max_connection_pool_size}"
        )

    @property
    def database(self) -> str | None:
        """세션 데이터베이스 (None이면 서버 기본 데이터베이스)"""
        return self._database

    async def connect(self) -> None:
        """Neo4j 드라이버 연결 초기화"""
        if self._driver is not None:
            logger.debug("Driver already connected, skipping connection")
            return

        try:
            self._driver = AsyncGraphDatabase.driver(
                self._uri,
                auth=basic_auth(self._user, self._password),
                max_connection_pool_size=self._max_connection_pool_size,
                connection_timeout=self._connection_timeout,
            )
            await self._driver.verify_connectivity()
            logger.info(
                f"Successfully connected to Neo4j at {_sanitize_uri(self._uri)}"
            )

        except AuthError as e:
            logger.error(f"Neo4j authentication failed: {e}")
            await self._discard_driver()
            raise DatabaseAuthenticationError(
                f"Failed to authenticate with Neo4j: {e}"
            ) from e
        except ServiceUnavailable as e:
            logger.error(f"Neo4j service unavailable: {e}")
            await self._discard_driver()
            raise DatabaseConnectionError(
                f"Neo4j service is unavailable at {_sanitize_uri(self._uri)}: {e}"
            ) from e
        except (Neo4jError, DriverError, OSError) as e:
            logger.error(f"Failed to connect to Neo4j: {e}")
            await self._discard_driver()
            raise DatabaseConnectionError(f"Failed to connect to Neo4j: {e}") from e

    async def _discard_driver(self) -> None:
        """연결 실패 시 생성된 드라이버 정리"""
        if self._driver is not None:
            await self._driver.close()
            self._driver = None

    async def close(self) -> None:
        """Neo4j 드라이버 연결 종료"""
        if self._driver is not None:
            await self._driver.close()
            self._driver = None
            logger.info("Neo4j driver closed")

    async def __aenter__(self) -> "Neo4jClient":
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.close()

    @property
    def driver(self) -> AsyncDriver:
        if self._driver is None:
            raise DatabaseConnectionError(
                "Neo4j driver is not initialized. Call connect() first."
            )
        return self._driver

    @asynccontextmanager
    async def session(
        self,
        database: str | None = None,
        **kwargs: Any,
    ) -> AsyncIterator[AsyncSession]:
        db = database or self._database
        if db:
            kwargs["database"] = db
        session = self.driver.session(**kwargs)
        try:
            yield session
        finally:
            await session.close()

    async def execute_query(
        self,
        query: str,
        parameters: dict[str, Any] | None = None,
        database: str | None = None,
    ) -> list[dict[str, Any]]:
        """읽기 트랜잭션으로 쿼리 실행 및 결과 반환"""
        try:
            async with self.session(database=database) as session:
                records = await session.execute_read(
                    _collect_records, query, parameters or {}
                )
                logger.debug(
                    f"Query executed successfully: {len(records)} records returned"
                )
                return records
        except ServiceUnavailable as e:
            logger.error(f"Neo4j service unavailable during query: {e}")
            raise DatabaseConnectionError(f"Neo4j service is unavailable: {e}") from e
        except (Neo4jError, DriverError) as e:
            logger.error(f"Query execution failed: {e}")
            raise DatabaseError(f"Failed to execute query: {e}") from e

    async def execute_update(
        self,
        query: str,
        parameters: dict[str, Any] | None = None,
        database: str | None = None,
    ) -> dict[str, int]:
        """쓰기 쿼리 실행 후 결과 요약의 카운터 반환 (properties_set 등)"""
        try:
            async with self.session(database=database) as session:
                counters = await session.execute_write(
                    _collect_counters, query, parameters or {}
                )
                logger.debug(f"Update query executed: {counters}")
                return counters
        except ServiceUnavailable as e:
            logger.error(f"Neo4j service unavailable during update: {e}")
            raise DatabaseConnectionError(f"Neo4j service is unavailable: {e}") from e
        except (Neo4jError, DriverError) as e:
            logger.error(f"Update query failed: {e}")
            raise DatabaseError(f"Failed to execute update query: {e}") from e

    async def health_check(self) -> dict[str, Any]:
        """Neo4j 연결 상태 확인"""
        result = {
            "connected": False,
            "uri": _sanitize_uri(self._uri),
            "database": self._database,
            "server_info": None,
            "error": None,
        }

        if self._driver is None:
            result["error"] = "Driver not initialized"
            return result

        try:
            await self._driver.verify_connectivity()
            server_info = await self._driver.get_server_info()
            result["connected"] = True
            result["server_info"] = {
                "address": str(server_info.address),
                "agent": server_info.agent,
                "protocol_version": str(server_info.protocol_version),
            }
        except (Neo4jError, DriverError, OSError) as e:
            result["error"] = str(e)
            logger.warning(f"Health check failed: {e}")

        return result
