"""
도메인 예외 정의

애플리케이션 전역에서 사용되는 커스텀 예외 클래스를 정의합니다.
"""


class MoviesGraphError(Exception):
    """Movies Graph 애플리케이션 기본 예외"""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# ============================================
# 데이터베이스 관련 예외
# ============================================


class DatabaseError(MoviesGraphError):
    """데이터베이스 관련 기본 예외"""

    def __init__(self, message: str, code: str = "DATABASE_ERROR"):
        super().__init__(message, code)


class DatabaseConnectionError(DatabaseError):
    """데이터베이스 연결 실패"""

    def __init__(self, message: str):
        super().__init__(message, code="DATABASE_CONNECTION_ERROR")


class DatabaseAuthenticationError(DatabaseError):
    """데이터베이스 인증 실패"""

    def __init__(self, message: str):
        super().__init__(message, code="DATABASE_AUTH_ERROR")


class QueryExecutionError(DatabaseError):
    """쿼리 실행 실패"""

    def __init__(self, message: str, query: str = ""):
        self._query = query
        super().__init__(message, code="QUERY_EXECUTION_ERROR")


class EntityNotFoundError(DatabaseError):
    """엔티티를 찾을 수 없음"""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            f"{entity_type} with id '{entity_id}' not found",
            code="ENTITY_NOT_FOUND",
        )


# ============================================
# 그래프 탐색 관련 예외
# ============================================


class TraversalError(DatabaseError):
    """이웃 탐색 쿼리 실패 (연결 실패, 쿼리 오류 등)"""

    def __init__(self, message: str, anchor_id: int | None = None):
        self.anchor_id = anchor_id
        super().__init__(message, code="TRAVERSAL_ERROR")


class MalformedTraversalResult(MoviesGraphError):
    """
    탐색 결과 무결성 위반

    관계의 양 끝 노드가 같은 레코드의 노드와 일치하지 않거나,
    레코드 필드가 누락/잘못된 타입인 경우 발생합니다.
    """

    def __init__(self, message: str, relationship_id: int | None = None):
        self.relationship_id = relationship_id
        super().__init__(message, code="MALFORMED_TRAVERSAL_RESULT")


# ============================================
# 입력 검증 관련 예외
# ============================================


class ValidationError(MoviesGraphError):
    """입력 검증 실패"""

    def __init__(self, message: str, field: str = ""):
        self.field = field
        super().__init__(message, code="VALIDATION_ERROR")


# ============================================
# 설정 관련 예외
# ============================================


class ConfigurationError(MoviesGraphError):
    """설정 오류"""

    def __init__(self, message: str, config_key: str = ""):
        self.config_key = config_key
        super().__init__(message, code="CONFIGURATION_ERROR")
