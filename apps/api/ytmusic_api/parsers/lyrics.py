"""Locate lyrics identifiers and text in ``next`` and ``browse`` responses."""

from __future__ import annotations

from typing import Any, Optional

from .extractors import dig

LYRICS_TAB_INDEX = 1


def extract_lyrics_browse_id(next_response: Any) -> Optional[str]:
    """Browse id behind the lyrics tab of the watch-next panel."""
    browse_id = dig(
        next_response,
        "contents",
        "singleColumnMusicWatchNextResultsRenderer",
        "tabbedRenderer",
        "watchNextTabbedResultsRenderer",
        "tabs",
        LYRICS_TAB_INDEX,
        "tabRenderer",
        "endpoint",
        "browseEndpoint",
        "browseId",
    )
    return browse_id if isinstance(browse_id, str) and browse_id else None


def extract_lyrics_text(browse_response: Any) -> Optional[str]:
    text = dig(
        browse_response,
        "contents",
        "sectionListRenderer",
        "contents",
        0,
        "musicDescriptionShelfRenderer",
        "description",
        "runs",
        0,
        "text",
    )
    return text if isinstance(text, str) and text else None
