"""Normalizer for the ``musicCardShelfRenderer`` best-match card."""

from __future__ import annotations

from typing import Any, List

from ..schemas.items import TopResult
from .detection import ItemShape, detect_from_item_shape
from .extractors import dig, joined_text, run_text, runs_at, thumbnail_list
from .normalizers import normalize_item

# Checked in order against the subtitle's first run.
_SUBTITLE_TYPES = (
    ("song", "song"),
    ("video", "video"),
    ("artist", "artist"),
    ("album", "album"),
    ("playlist", "community_playlist"),
)


def _card_type(subtitle_runs: List[dict]) -> str:
    first_word = run_text(subtitle_runs[0]).lower() if subtitle_runs else ""
    for needle, card_type in _SUBTITLE_TYPES:
        if needle in first_word:
            return card_type
    return "unknown"


def _secondary_matches(card: Any) -> list:
    matches = []
    contents = dig(card, "contents")
    if not isinstance(contents, list):
        return matches
    for content in contents:
        item = dig(content, "musicResponsiveListItemRenderer")
        if not isinstance(item, dict):
            continue
        category = detect_from_item_shape(ItemShape.from_item(item))
        if category is not None:
            matches.append(normalize_item(category, item))
    return matches


def normalize_top_result(card: Any) -> TopResult:
    subtitle_runs = runs_at(card, "subtitle", "runs")
    video_id = dig(card, "onTap", "watchEndpoint", "videoId")
    browse_id = dig(card, "onTap", "browseEndpoint", "browseId")
    return TopResult(
        type=_card_type(subtitle_runs),
        title=joined_text(runs_at(card, "title", "runs")),
        subtitle=joined_text(subtitle_runs),
        video_id=video_id if isinstance(video_id, str) else "",
        browse_id=browse_id if isinstance(browse_id, str) else "",
        thumbnails=thumbnail_list(card),
        more=_secondary_matches(card) or None,
    )
