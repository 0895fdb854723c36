"""
Movies API 스키마

영화 조회/검색/투표 API의 응답 모델을 정의합니다.
"""

from pydantic import BaseModel, Field

from movies_graph.domain.models import Movie


class CastMemberResponse(BaseModel):
    """출연진"""

    name: str = Field(..., description="인물 이름")
    job: str = Field(..., description="참여 형태 (acted, directed, produced, ...)")
    role: str = Field(default="", description="배역 (쉼표로 구분)")


class MovieResponse(BaseModel):
    """영화 응답"""

    title: str = Field(..., description="영화 제목")
    released: int | None = Field(default=None, description="개봉 연도")
    tagline: str | None = Field(default=None, description="태그라인")
    votes: int | None = Field(default=None, description="투표 수")
    cast: list[CastMemberResponse] = Field(default_factory=list, description="출연진")

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieResponse":
        return cls(
            title=movie.title,
            released=movie.released,
            tagline=movie.tagline,
            votes=movie.votes,
            cast=[
                CastMemberResponse(name=c.name, job=c.job, role=c.role)
                for c in movie.cast
            ],
        )


class MovieListResponse(BaseModel):
    """영화 검색 응답"""

    movies: list[MovieResponse] = Field(default_factory=list)
    count: int = Field(default=0, description="결과 수")


class VoteResponse(BaseModel):
    """투표 응답"""

    title: str = Field(..., description="영화 제목")
    updates: int = Field(..., description="변경된 속성 수 (0이면 영화 없음)")
