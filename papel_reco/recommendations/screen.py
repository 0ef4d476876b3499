from __future__ import annotations

import logging
from typing import Callable, Protocol

from papel_reco.auth import AuthTokenProvider
from papel_reco.metrics.metrics import Metrics
from papel_reco.recommendations.client import RecommendationClient
from papel_reco.recommendations.errors import RecommendationError
from papel_reco.recommendations.render import render_list
from papel_reco.recommendations.types import FetchFailure, FetchOutcome
from papel_reco.recommendations.view_model import RecommendationListViewModel


logger = logging.getLogger(__name__)


ErrorListener = Callable[[RecommendationError], None]


class Navigator(Protocol):
    def open_article(self, article_id: str) -> None:
        """Present the detail view of one article."""


class RecommendationScreen:
    """Controller for the recommended-articles list.

    ``on_mount`` fetches a batch and swaps it into the view model. Failures
    keep the previous list and are reported only through logging, metrics
    and any registered error listeners. Overlapping mounts are not
    serialized: whichever fetch completes last wins.
    """

    def __init__(
        self,
        client: RecommendationClient,
        token_provider: AuthTokenProvider,
        url: str,
        navigator: Navigator,
        view_model: RecommendationListViewModel | None = None,
        metrics: Metrics | None = None,
    ) -> None:
        self._client = client
        self._tokens = token_provider
        self._url = url
        self._navigator = navigator
        self.view_model = view_model if view_model is not None else RecommendationListViewModel()
        self._metrics = metrics
        self._error_listeners: list[ErrorListener] = []

    def add_error_listener(self, listener: ErrorListener) -> None:
        self._error_listeners.append(listener)

    async def on_mount(self) -> FetchOutcome:
        outcome = await self._client.fetch(self._url, self._tokens.current_token())

        if isinstance(outcome, FetchFailure):
            self._report_failure(outcome.error)
            return outcome

        self.view_model.replace(outcome.result)
        logger.info(
            "loaded %s recommended articles (because=%s) in %sms",
            self.view_model.item_count(),
            outcome.result.because.article_id,
            outcome.duration_ms,
        )
        if self._metrics is not None:
            self._metrics.record_success(outcome.duration_ms, self.view_model.item_count())
        return outcome

    def on_item_selected(self, index: int) -> str:
        article_id = self.view_model.article_id_at(index)
        self._navigator.open_article(article_id)
        return article_id

    def on_unmount(self) -> None:
        self.view_model.clear()
        if self._metrics is not None:
            self._metrics.articles.set(0)

    def render(self) -> str:
        return render_list(self.view_model)

    def _report_failure(self, error: RecommendationError) -> None:
        logger.warning("recommendations fetch failed: %s", error)
        if self._metrics is not None:
            self._metrics.record_failure(error.error_type)
        for listener in list(self._error_listeners):
            try:
                listener(error)
            except Exception:
                logger.exception("recommendation error listener failed")
