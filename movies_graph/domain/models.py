"""
Domain Models

영화 카탈로그 값 객체 정의
- Movie / CastMember: 영화 조회 및 검색 결과
- D3Node / D3Link / D3Graph: 배우-영화 포스 그래프
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CastMember:
    """영화에 참여한 인물"""

    name: str
    job: str
    role: str = ""


@dataclass(frozen=True, slots=True)
class Movie:
    """영화"""

    title: str
    released: int | None = None
    tagline: str | None = None
    votes: int | None = None
    cast: tuple[CastMember, ...] = ()


@dataclass(frozen=True, slots=True)
class D3Node:
    """포스 그래프 노드 (label: movie | actor)"""

    title: str
    label: str


@dataclass(frozen=True, slots=True)
class D3Link:
    """포스 그래프 링크 (source/target은 노드 리스트 인덱스)"""

    source: int
    target: int


@dataclass(frozen=True, slots=True)
class D3Graph:
    """배우-영화 포스 그래프"""

    nodes: tuple[D3Node, ...] = ()
    links: tuple[D3Link, ...] = ()
