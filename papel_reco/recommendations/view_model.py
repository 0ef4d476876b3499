from __future__ import annotations

from papel_reco.recommendations.types import ArticleSummary, BecauseReason, RecommendationResult


class RecommendationListViewModel:
    """Holds the article list currently shown by one recommendation screen.

    Every applied result fully replaces the previous list. Selection indices
    are positions in that list, in server order.
    """

    def __init__(self) -> None:
        self._articles: tuple[ArticleSummary, ...] = ()
        self._because: BecauseReason | None = None

    @property
    def because(self) -> BecauseReason | None:
        return self._because

    def replace(self, result: RecommendationResult) -> None:
        self._articles = tuple(result.articles)
        self._because = result.because

    def clear(self) -> None:
        self._articles = ()
        self._because = None

    def item_count(self) -> int:
        return len(self._articles)

    def summaries(self) -> tuple[ArticleSummary, ...]:
        return self._articles

    def summary_at(self, index: int) -> ArticleSummary:
        if not 0 <= index < len(self._articles):
            raise IndexError(f"recommendation index {index} out of range [0, {len(self._articles)})")
        return self._articles[index]

    def article_id_at(self, index: int) -> str:
        return self.summary_at(index).id
