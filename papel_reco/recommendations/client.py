from __future__ import annotations

import logging
import time

import httpx

from papel_reco.recommendations.errors import (
    ParseError,
    TransportError,
    ERROR_HTTP,
    ERROR_HTTP_STATUS,
    ERROR_TIMEOUT,
)
from papel_reco.recommendations.parser import parse_recommendations
from papel_reco.recommendations.types import FetchFailure, FetchOutcome, FetchSuccess


logger = logging.getLogger(__name__)


RECOMMENDED_ARTICLES_SEGMENT = "articles"


def build_recommendations_url(host: str, path_prefix: str) -> str:
    return host + path_prefix + RECOMMENDED_ARTICLES_SEGMENT


class RecommendationClient:
    def __init__(
        self,
        timeout_seconds: float,
        user_agent: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            follow_redirects=True,
            timeout=httpx.Timeout(timeout_seconds),
            headers={
                "User-Agent": user_agent,
                "Accept": "application/json",
            },
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch(self, url: str, token: str) -> FetchOutcome:
        """GET the recommendation batch at ``url``.

        Transport and parse failures are returned as :class:`FetchFailure`
        rather than raised. No retries are attempted.
        """

        if not token:
            raise ValueError("bearer token must be non-empty")

        headers = {"Authorization": f"Bearer {token}"}
        started = time.perf_counter()

        try:
            resp = await self._client.get(url, headers=headers)
        except httpx.TimeoutException as e:
            return FetchFailure(TransportError(ERROR_TIMEOUT, str(e) or type(e).__name__))
        except httpx.TransportError as e:
            return FetchFailure(TransportError(ERROR_HTTP, str(e) or type(e).__name__))
        except httpx.HTTPError as e:
            # redirect loops, undecodable Content-Encoding bodies
            return FetchFailure(TransportError(ERROR_HTTP, f"{type(e).__name__}: {e}"))

        duration_ms = int((time.perf_counter() - started) * 1000)

        if not resp.is_success:
            return FetchFailure(
                TransportError(
                    ERROR_HTTP_STATUS,
                    f"{resp.status_code} {resp.reason_phrase}",
                    status_code=resp.status_code,
                )
            )

        try:
            result = parse_recommendations(resp.text)
        except ParseError as e:
            return FetchFailure(e)

        logger.debug("fetched %s recommendations in %sms", len(result.articles), duration_ms)
        return FetchSuccess(result=result, http_status=resp.status_code, duration_ms=duration_ms)
