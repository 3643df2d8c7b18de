"""Category detection for search result items.

Mixed ("all") results carry no machine-readable type, so the category is
reconstructed from rendering hints. Precedence is fixed: an explicit shelf
title wins; otherwise the item shape is inspected, first match wins.

The last-resort column-count rule (3 columns + video id -> song, 2 columns +
video id -> video) is a known heuristic limitation and can misclassify.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .extractors import column_count, column_runs, item_page_type, item_video_id, run_text
from .types import PAGE_TYPE_PLAYLIST, PAGE_TYPE_PODCAST_SHOW, SearchCategory

_SHELF_TITLES: Dict[str, SearchCategory] = {
    "Songs": SearchCategory.SONGS,
    "Videos": SearchCategory.VIDEOS,
    "Artists": SearchCategory.ARTISTS,
    "Albums": SearchCategory.ALBUMS,
    "Podcasts": SearchCategory.PODCASTS,
    "Episodes": SearchCategory.PODCAST_EPISODES,
    "Profiles": SearchCategory.PROFILES,
    "Community playlists": SearchCategory.COMMUNITY_PLAYLISTS,
}

_ALBUM_LABELS = ("album", "ep", "single")


@dataclass(frozen=True)
class ItemShape:
    """The handful of item features the shape heuristic looks at."""

    first_label: str = ""  # lower-cased text of column 1's first run
    page_type: Optional[str] = None
    column_count: int = 0
    has_video_id: bool = False

    @classmethod
    def from_item(cls, item: Any) -> "ItemShape":
        runs = column_runs(item, 1)
        return cls(
            first_label=run_text(runs[0]).lower() if runs else "",
            page_type=item_page_type(item),
            column_count=column_count(item),
            has_video_id=item_video_id(item) is not None,
        )


def detect_from_group_label(label: Optional[str]) -> Optional[SearchCategory]:
    """Exact shelf-title lookup; ``None`` for unknown titles."""
    if not label:
        return None
    return _SHELF_TITLES.get(label)


def detect_from_item_shape(shape: ItemShape) -> Optional[SearchCategory]:
    label = shape.first_label
    if "song" in label:
        return SearchCategory.SONGS
    if "video" in label:
        return SearchCategory.VIDEOS
    if label == "artist":
        return SearchCategory.ARTISTS
    if label in _ALBUM_LABELS:
        return SearchCategory.ALBUMS
    if label == "podcast":
        return SearchCategory.PODCASTS
    if label == "profile":
        return SearchCategory.PROFILES

    if shape.page_type == PAGE_TYPE_PLAYLIST:
        return SearchCategory.COMMUNITY_PLAYLISTS
    if shape.page_type == PAGE_TYPE_PODCAST_SHOW:
        return SearchCategory.PODCASTS

    if shape.has_video_id and shape.column_count == 3:
        return SearchCategory.SONGS
    if shape.has_video_id and shape.column_count == 2:
        return SearchCategory.VIDEOS
    return None


def detect_item_category(item: Any, group_label: Optional[str] = None) -> Optional[SearchCategory]:
    """Shelf title first, item shape only when the title says nothing."""
    category = detect_from_group_label(group_label)
    if category is not None:
        return category
    return detect_from_item_shape(ItemShape.from_item(item))
