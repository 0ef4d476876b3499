from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from papel_reco.recommendations.errors import RecommendationError


@dataclass(frozen=True)
class ArticleSummary:
    id: str
    title: str
    body: str
    image_url: str | None = None


@dataclass(frozen=True)
class BecauseReason:
    article_id: str
    title: str


@dataclass(frozen=True)
class RecommendationResult:
    because: BecauseReason
    articles: tuple[ArticleSummary, ...]


@dataclass(frozen=True)
class FetchSuccess:
    result: RecommendationResult
    http_status: int
    duration_ms: int

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class FetchFailure:
    error: RecommendationError

    @property
    def ok(self) -> bool:
        return False


FetchOutcome = Union[FetchSuccess, FetchFailure]
