"""
Domain Validators

도메인 전반에서 사용되는 입력 검증 유틸리티
"""

from movies_graph.domain.exceptions import ValidationError

# 검색어 최대 길이
MAX_SEARCH_LENGTH = 200


def validate_title(title: str, field_name: str = "title") -> str:
    """
    영화 제목 검증

    Args:
        title: 검증할 제목
        field_name: 에러 메시지에 표시할 필드명

    Returns:
        앞뒤 공백이 제거된 제목

    Raises:
        ValidationError: 비어 있는 제목
    """
    stripped = (title or "").strip()
    if not stripped:
        raise ValidationError(f"Empty {field_name} is not allowed", field=field_name)
    return stripped


def validate_search_term(search: str) -> str:
    """검색어 검증 (공백 제거, 길이 제한)"""
    stripped = validate_title(search, "search")
    if len(stripped) > MAX_SEARCH_LENGTH:
        raise ValidationError(
            f"Search term is too long (max {MAX_SEARCH_LENGTH} characters)",
            field="search",
        )
    return stripped


def validate_limit(limit: int, field_name: str = "limit") -> int:
    """양의 정수 limit 검증"""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValidationError(
            f"Invalid {field_name}: {limit!r}. Must be a positive integer.",
            field=field_name,
        )
    return limit
