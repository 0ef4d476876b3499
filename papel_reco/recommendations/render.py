from __future__ import annotations

from papel_reco.recommendations.types import ArticleSummary
from papel_reco.recommendations.view_model import RecommendationListViewModel
from papel_reco.utils import collapse_ws, truncate


EMPTY_LIST_TEXT = "(no recommendations)"


def render_item(index: int, summary: ArticleSummary, body_chars: int = 140) -> str:
    lines: list[str] = [f"[{index}] {collapse_ws(summary.title)}"]

    excerpt = truncate(collapse_ws(summary.body), body_chars)
    if excerpt:
        lines.append(f"    {excerpt}")

    if summary.image_url is not None:
        lines.append(f"    image: {summary.image_url}")

    return "\n".join(lines)


def render_list(view_model: RecommendationListViewModel, body_chars: int = 140) -> str:
    if view_model.item_count() == 0:
        return EMPTY_LIST_TEXT
    rows = [render_item(i, view_model.summary_at(i), body_chars) for i in range(view_model.item_count())]
    return "\n\n".join(rows)
