from __future__ import annotations

import logging

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram, start_http_server


logger = logging.getLogger(__name__)


class Metrics:
    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry if registry is not None else CollectorRegistry()

        self.fetch_success_total = Counter(
            "recommendation_fetch_success_total",
            "Successful recommendation fetches",
            registry=self.registry,
        )
        self.fetch_fail_total = Counter(
            "recommendation_fetch_fail_total",
            "Failed recommendation fetches",
            ["type"],
            registry=self.registry,
        )
        self.fetch_latency_seconds = Histogram(
            "recommendation_fetch_latency_seconds",
            "Recommendation fetch latency",
            buckets=(0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10),
            registry=self.registry,
        )
        self.articles = Gauge(
            "recommendation_articles",
            "Articles currently listed",
            registry=self.registry,
        )

    def start_server(self, bind: str, port: int) -> None:
        start_http_server(port, addr=bind, registry=self.registry)
        logger.info("metrics server started at %s:%s", bind, port)

    def record_success(self, duration_ms: int, article_count: int) -> None:
        self.fetch_success_total.inc()
        self.fetch_latency_seconds.observe(duration_ms / 1000.0)
        self.articles.set(article_count)

    def record_failure(self, error_type: str) -> None:
        self.fetch_fail_total.labels(type=error_type).inc()
