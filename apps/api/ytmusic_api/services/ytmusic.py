"""
YouTube Music Service Layer

Provides a lazily built singleton wrapper around :class:`YTMusicClient`.
The client holds only immutable configuration, so requests share no state:
every call opens its own upstream session and normalizes fresh data.
"""

from __future__ import annotations

from typing import Optional

from ..core.config import settings
from ..core.logger import get_logger
from ..parsers.lyrics import extract_lyrics_browse_id, extract_lyrics_text
from ..parsers.search import parse_search_response
from ..schemas.items import SearchResultSet
from ..schemas.lyrics import LyricsResult
from .ytmusic_client import YTMusicClient

logger = get_logger("ytmusic_service")


class YTMusicService:
    """Lazy-initialized client wrapper for API usage."""

    def __init__(self, client: Optional[YTMusicClient] = None) -> None:
        self._client = client

    @property
    def client(self) -> YTMusicClient:
        if self._client is None:
            logger.info("Initializing YTMusicClient for %s", settings.YTM_BASE_URL)
            self._client = YTMusicClient.from_settings(settings)
        return self._client

    def search(self, *, query: str, search_type: str = "all") -> SearchResultSet:
        raw = self.client.search(query, search_type)
        return parse_search_response(raw, search_type)

    def get_lyrics(self, video_id: str) -> LyricsResult:
        """Resolve the lyrics browse id, then fetch the lyrics text.

        The second call depends on the first; without a browse id the
        lookup stops and reports both values as missing.
        """
        browse_id = extract_lyrics_browse_id(self.client.next(video_id))
        if browse_id is None:
            logger.info("No lyrics tab for video_id=%s", video_id)
            return LyricsResult(lyrics=None, browse_id=None)

        lyrics = extract_lyrics_text(self.client.browse(browse_id))
        return LyricsResult(lyrics=lyrics, browse_id=browse_id)


ytmusic_service = YTMusicService()
