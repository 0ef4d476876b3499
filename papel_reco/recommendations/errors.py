from __future__ import annotations


_MAX_DETAIL_CHARS = 240


def _redact_detail(detail: str) -> str:
    detail = detail.strip()
    if len(detail) > _MAX_DETAIL_CHARS:
        detail = detail[:_MAX_DETAIL_CHARS] + "…"
    return detail


class RecommendationError(Exception):
    def __init__(self, error_type: str, detail: str = ""):
        detail = _redact_detail(detail)
        super().__init__(f"{error_type}: {detail}")
        self.error_type = error_type
        self.detail = detail


class TransportError(RecommendationError):
    """Network failure or a non-2xx response."""

    def __init__(self, error_type: str, detail: str = "", status_code: int | None = None):
        super().__init__(error_type, detail)
        self.status_code = status_code


class ParseError(RecommendationError):
    """Response body is not a complete recommendation batch."""


ERROR_TIMEOUT = "TIMEOUT"
ERROR_HTTP = "HTTP_ERROR"
ERROR_HTTP_STATUS = "HTTP_STATUS"

ERROR_INVALID_JSON = "INVALID_JSON"
ERROR_MISSING_FIELD = "MISSING_FIELD"
ERROR_WRONG_TYPE = "WRONG_TYPE"
