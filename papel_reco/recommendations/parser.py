from __future__ import annotations

import json
from typing import Any

from papel_reco.recommendations.errors import (
    ParseError,
    ERROR_INVALID_JSON,
    ERROR_MISSING_FIELD,
    ERROR_WRONG_TYPE,
)
from papel_reco.recommendations.types import ArticleSummary, BecauseReason, RecommendationResult


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    if isinstance(value, (int, float)):
        return "number"
    return type(value).__name__


def _require_object(value: Any, path: str) -> dict:
    if not isinstance(value, dict):
        raise ParseError(ERROR_WRONG_TYPE, f"{path}: expected object, got {_type_name(value)}")
    return value


def _require_key(obj: dict, key: str, path: str) -> Any:
    if key not in obj:
        raise ParseError(ERROR_MISSING_FIELD, f"{path}.{key}" if path else key)
    return obj[key]


def _require_text(obj: dict, key: str, path: str) -> str:
    value = _require_key(obj, key, path)
    where = f"{path}.{key}"
    if isinstance(value, str):
        return value
    # numbers are accepted as their decimal text; bool is an int subclass
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise ParseError(ERROR_WRONG_TYPE, f"{where}: expected string, got {_type_name(value)}")


def _optional_text(obj: dict, key: str, path: str) -> str | None:
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ParseError(ERROR_WRONG_TYPE, f"{path}.{key}: expected string, got {_type_name(value)}")
    return value


def _parse_because(value: Any) -> BecauseReason:
    obj = _require_object(value, "because")
    return BecauseReason(
        article_id=_require_text(obj, "_id", "because"),
        title=_require_text(obj, "title", "because"),
    )


def _parse_article(value: Any, index: int) -> ArticleSummary:
    path = f"articles[{index}]"
    obj = _require_object(value, path)
    return ArticleSummary(
        id=_require_text(obj, "_id", path),
        title=_require_text(obj, "title", path),
        body=_require_text(obj, "body", path),
        image_url=_optional_text(obj, "imgUri", path),
    )


def parse_recommendations(body: str) -> RecommendationResult:
    """Decode a recommendations response body.

    The parse is all-or-nothing: the first missing or mistyped field fails
    the whole batch with :class:`ParseError`. Unknown keys are ignored and
    article order is kept exactly as received.
    """

    try:
        data = json.loads(body)
    except (TypeError, ValueError, RecursionError) as e:
        raise ParseError(ERROR_INVALID_JSON, str(e)) from e

    top = _require_object(data, "$")
    because = _parse_because(_require_key(top, "because", ""))

    raw_articles = _require_key(top, "articles", "")
    if not isinstance(raw_articles, list):
        raise ParseError(ERROR_WRONG_TYPE, f"articles: expected array, got {_type_name(raw_articles)}")

    articles = tuple(_parse_article(item, i) for i, item in enumerate(raw_articles))
    return RecommendationResult(because=because, articles=articles)
