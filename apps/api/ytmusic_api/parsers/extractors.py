"""Field extractors over raw YouTube Music renderer nodes.

The upstream payload is shaped for rendering, not for consumption: a value
can sit in one of several nested locations, and any level may be missing.
Every helper here returns a safe default (``""``, ``[]`` or ``None``) instead
of raising, and never mutates its input.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..schemas.items import Thumbnail

PathKey = Union[str, int]
KeyPath = Tuple[PathKey, ...]
Run = Dict[str, Any]

_SEPARATORS = ("•", "")

_PLAY_ENDPOINT: KeyPath = (
    "overlay",
    "musicItemThumbnailOverlayRenderer",
    "content",
    "musicPlayButtonRenderer",
    "playNavigationEndpoint",
)
_FIRST_TITLE_RUN: KeyPath = (
    "flexColumns",
    0,
    "musicResponsiveListItemFlexColumnRenderer",
    "text",
    "runs",
    0,
)
_BROWSE_PAGE_TYPE: KeyPath = (
    "browseEndpoint",
    "browseEndpointContextSupportedConfigs",
    "browseEndpointContextMusicConfig",
    "pageType",
)

# Candidate locations in precedence order; the first non-empty one wins.
_VIDEO_ID_PATHS: Sequence[KeyPath] = (
    ("playlistItemData", "videoId"),
    _PLAY_ENDPOINT + ("watchEndpoint", "videoId"),
    _FIRST_TITLE_RUN + ("navigationEndpoint", "watchEndpoint", "videoId"),
)
_PLAYLIST_ID_PATHS: Sequence[KeyPath] = (
    _PLAY_ENDPOINT + ("watchPlaylistEndpoint", "playlistId"),
    _PLAY_ENDPOINT + ("watchEndpoint", "playlistId"),
)


def dig(node: Any, *path: PathKey) -> Any:
    """Walk ``path`` through nested dicts/lists, returning ``None`` on any miss."""
    current = node
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not 0 <= key < len(current):
                return None
            current = current[key]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(key)
        if current is None:
            return None
    return current


def first_present(node: Any, paths: Iterable[KeyPath]) -> Optional[str]:
    """Return the first non-empty string found at any of ``paths``."""
    for path in paths:
        value = dig(node, *path)
        if isinstance(value, str) and value:
            return value
    return None


def run_text(run: Any) -> str:
    text = dig(run, "text")
    return text if isinstance(text, str) else ""


def joined_text(runs: Iterable[Run]) -> str:
    return "".join(run_text(run) for run in runs)


def runs_at(node: Any, *path: PathKey) -> List[Run]:
    """Return the run list at ``path`` keeping only well-formed (dict) runs."""
    runs = dig(node, *path)
    if not isinstance(runs, list):
        return []
    return [run for run in runs if isinstance(run, dict)]


def column_runs(item: Any, col_index: int) -> List[Run]:
    """Text runs of flex column ``col_index``; ``[]`` when absent."""
    return runs_at(item, "flexColumns", col_index, "musicResponsiveListItemFlexColumnRenderer", "text", "runs")


def column_text(item: Any, col_index: int) -> str:
    return joined_text(column_runs(item, col_index))


def column_count(item: Any) -> int:
    columns = dig(item, "flexColumns")
    return len(columns) if isinstance(columns, list) else 0


def endpoint_page_type(endpoint: Any) -> Optional[str]:
    """Page-type classifier of a navigation endpoint's browse target."""
    page_type = dig(endpoint, *_BROWSE_PAGE_TYPE)
    return page_type if isinstance(page_type, str) else None


def run_browse_id(run: Any) -> str:
    browse_id = dig(run, "navigationEndpoint", "browseEndpoint", "browseId")
    return browse_id if isinstance(browse_id, str) else ""


def find_run_by_page_type(runs: Iterable[Run], page_type: str) -> Optional[Run]:
    """First run whose browse target is tagged with ``page_type``."""
    for run in runs:
        if endpoint_page_type(run.get("navigationEndpoint")) == page_type:
            return run
    return None


def find_run_with_browse(runs: Iterable[Run]) -> Optional[Run]:
    """First run carrying any browse target, regardless of page type."""
    for run in runs:
        if dig(run, "navigationEndpoint", "browseEndpoint") is not None:
            return run
    return None


def plain_text_runs(runs: Iterable[Run]) -> List[Run]:
    """Drop runs that navigate somewhere and bare separators."""
    return [
        run
        for run in runs
        if not run.get("navigationEndpoint") and run_text(run).strip() not in _SEPARATORS
    ]


def _as_number(value: Any) -> Optional[Union[int, float]]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    return None


def thumbnail_list(node: Any) -> List[Thumbnail]:
    """Map the thumbnail sub-tree to ``Thumbnail`` models, keeping upstream order."""
    thumbnails = dig(node, "thumbnail", "musicThumbnailRenderer", "thumbnail", "thumbnails")
    if not isinstance(thumbnails, list):
        return []
    return [
        Thumbnail(
            url=thumb.get("url") if isinstance(thumb.get("url"), str) else "",
            width=_as_number(thumb.get("width")),
            height=_as_number(thumb.get("height")),
        )
        for thumb in thumbnails
        if isinstance(thumb, dict)
    ]


def item_video_id(item: Any) -> Optional[str]:
    """Video id from item data, the play button, or the title run, in that order."""
    return first_present(item, _VIDEO_ID_PATHS)


def item_playlist_id(item: Any) -> Optional[str]:
    return first_present(item, _PLAYLIST_ID_PATHS)


def item_browse_id(item: Any) -> Optional[str]:
    return first_present(item, [("navigationEndpoint", "browseEndpoint", "browseId")])


def item_page_type(item: Any) -> Optional[str]:
    return endpoint_page_type(dig(item, "navigationEndpoint"))
