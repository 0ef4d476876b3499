from __future__ import annotations

from dataclasses import dataclass
import os

from papel_reco.recommendations.client import build_recommendations_url


def _env_str(name: str, default: str | None = None) -> str:
    value = os.getenv(name)
    if value is None:
        if default is None:
            raise RuntimeError(f"Missing required env: {name}")
        return default
    return value


def _env_int(name: str, default: int | None = None) -> int:
    value = os.getenv(name)
    if value is None:
        if default is None:
            raise RuntimeError(f"Missing required env: {name}")
        return default
    return int(value)


def _env_float(name: str, default: float | None = None) -> float:
    value = os.getenv(name)
    if value is None:
        if default is None:
            raise RuntimeError(f"Missing required env: {name}")
        return default
    return float(value)


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip().lower()
    return value in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class Config:
    # Backend
    api_host: str
    recommendation_path: str
    auth_token: str
    http_timeout_seconds: float
    user_agent: str

    # Metrics
    metrics_enabled: bool
    metrics_bind: str
    metrics_port: int

    # Logging
    log_level: str
    log_file: str

    @property
    def recommendations_url(self) -> str:
        return build_recommendations_url(self.api_host, self.recommendation_path)


def load_config() -> Config:
    return Config(
        api_host=_env_str("PAPEL_API_HOST", "http://localhost:3000/"),
        recommendation_path=_env_str("PAPEL_RECOMMENDATION_PATH", "recommendation/"),
        auth_token=_env_str("PAPEL_AUTH_TOKEN"),
        http_timeout_seconds=_env_float("PAPEL_HTTP_TIMEOUT_SECONDS", 10.0),
        user_agent=_env_str("PAPEL_USER_AGENT", "papel-reco/0.1"),
        metrics_enabled=_env_bool("METRICS_ENABLED", False),
        metrics_bind=_env_str("METRICS_BIND", "127.0.0.1"),
        metrics_port=_env_int("METRICS_PORT", 9108),
        log_level=_env_str("LOG_LEVEL", "INFO"),
        log_file=_env_str("LOG_FILE", ""),
    )
