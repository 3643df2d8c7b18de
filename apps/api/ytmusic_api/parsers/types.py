"""Search categories and upstream page-type classifiers."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class SearchCategory(str, Enum):
    """Item categories a search can be filtered to (the ``type`` query value)."""

    SONGS = "songs"
    VIDEOS = "videos"
    ARTISTS = "artists"
    ALBUMS = "albums"
    PODCASTS = "podcasts"
    PODCAST_EPISODES = "podcast_episodes"
    PROFILES = "profiles"
    COMMUNITY_PLAYLISTS = "community_playlists"


SEARCH_TYPE_ALL = "all"

# Order matches the upstream filter table and the /api/info listing.
SEARCH_TYPES: Tuple[str, ...] = (
    SEARCH_TYPE_ALL,
    SearchCategory.SONGS.value,
    SearchCategory.ARTISTS.value,
    SearchCategory.VIDEOS.value,
    SearchCategory.PODCAST_EPISODES.value,
    SearchCategory.ALBUMS.value,
    SearchCategory.PROFILES.value,
    SearchCategory.COMMUNITY_PLAYLISTS.value,
    SearchCategory.PODCASTS.value,
)

PAGE_TYPE_ARTIST = "MUSIC_PAGE_TYPE_ARTIST"
PAGE_TYPE_ALBUM = "MUSIC_PAGE_TYPE_ALBUM"
PAGE_TYPE_USER_CHANNEL = "MUSIC_PAGE_TYPE_USER_CHANNEL"
PAGE_TYPE_PLAYLIST = "MUSIC_PAGE_TYPE_PLAYLIST"
PAGE_TYPE_PODCAST_SHOW = "MUSIC_PAGE_TYPE_PODCAST_SHOW_DETAIL_PAGE"
