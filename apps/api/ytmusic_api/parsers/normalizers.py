"""Per-category normalizers for ``musicResponsiveListItemRenderer`` nodes.

Each normalizer is a pure function of one raw item. Column 0 holds the
title; column 1 holds the secondary attributes, picked out either by the
page type of their browse target or by position/content among the plain
runs. Every field of the output model is always populated.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from ..schemas.items import (
    AlbumItem,
    ArtistItem,
    CommunityPlaylistItem,
    NormalizedItem,
    PodcastEpisodeItem,
    PodcastItem,
    ProfileItem,
    SongItem,
    VideoItem,
)
from .extractors import (
    Run,
    column_runs,
    column_text,
    find_run_by_page_type,
    find_run_with_browse,
    item_browse_id,
    item_playlist_id,
    item_video_id,
    plain_text_runs,
    run_browse_id,
    run_text,
    thumbnail_list,
)
from .types import (
    PAGE_TYPE_ALBUM,
    PAGE_TYPE_ARTIST,
    PAGE_TYPE_PODCAST_SHOW,
    PAGE_TYPE_USER_CHANNEL,
    SearchCategory,
)


def _title(item: Any) -> str:
    runs = column_runs(item, 0)
    return run_text(runs[0]) if runs else ""


def _last_duration(plain_runs: List[Run]) -> str:
    for run in reversed(plain_runs):
        if ":" in run_text(run):
            return run_text(run)
    return ""


def _first_matching(plain_runs: List[Run], predicate: Callable[[str], bool]) -> str:
    for run in plain_runs:
        if predicate(run_text(run)):
            return run_text(run)
    return ""


def _text_and_id(run: Optional[Run]) -> tuple[str, str]:
    if run is None:
        return "", ""
    return run_text(run), run_browse_id(run)


def normalize_song(item: Any) -> SongItem:
    runs = column_runs(item, 1)
    artist, artist_id = _text_and_id(find_run_by_page_type(runs, PAGE_TYPE_ARTIST))
    album, album_id = _text_and_id(find_run_by_page_type(runs, PAGE_TYPE_ALBUM))
    return SongItem(
        title=_title(item),
        video_id=item_video_id(item) or "",
        artist=artist,
        artist_id=artist_id,
        album=album,
        album_id=album_id,
        duration=_last_duration(plain_text_runs(runs)),
        plays=column_text(item, 2),
        thumbnails=thumbnail_list(item),
    )


def normalize_video(item: Any) -> VideoItem:
    runs = column_runs(item, 1)
    channel_run = find_run_by_page_type(runs, PAGE_TYPE_USER_CHANNEL) or find_run_by_page_type(
        runs, PAGE_TYPE_ARTIST
    )
    channel, channel_id = _text_and_id(channel_run)
    plain = plain_text_runs(runs)
    return VideoItem(
        title=_title(item),
        video_id=item_video_id(item) or "",
        channel=channel,
        channel_id=channel_id,
        views=_first_matching(plain, lambda text: "view" in text.lower() or "play" in text.lower()),
        duration=_last_duration(plain),
        thumbnails=thumbnail_list(item),
    )


def normalize_artist(item: Any) -> ArtistItem:
    plain = plain_text_runs(column_runs(item, 1))
    return ArtistItem(
        name=_title(item),
        browse_id=item_browse_id(item) or "",
        subscribers=_first_matching(plain, lambda text: text != "Artist"),
        thumbnails=thumbnail_list(item),
    )


def normalize_album(item: Any) -> AlbumItem:
    runs = column_runs(item, 1)
    artist, artist_id = _text_and_id(find_run_by_page_type(runs, PAGE_TYPE_ARTIST))
    plain = plain_text_runs(runs)
    return AlbumItem(
        title=_title(item),
        browse_id=item_browse_id(item) or "",
        # Album | EP | Single
        album_type=run_text(plain[0]) if plain else "",
        artist=artist,
        artist_id=artist_id,
        year=run_text(plain[-1]) if plain else "",
        playlist_id=item_playlist_id(item) or "",
        thumbnails=thumbnail_list(item),
    )


def normalize_podcast(item: Any) -> PodcastItem:
    publisher, publisher_id = _text_and_id(find_run_with_browse(column_runs(item, 1)))
    return PodcastItem(
        title=_title(item),
        browse_id=item_browse_id(item) or "",
        publisher=publisher,
        publisher_id=publisher_id,
        playlist_id=item_playlist_id(item) or "",
        thumbnails=thumbnail_list(item),
    )


def normalize_podcast_episode(item: Any) -> PodcastEpisodeItem:
    title_runs = column_runs(item, 0)
    runs = column_runs(item, 1)
    show, show_id = _text_and_id(find_run_by_page_type(runs, PAGE_TYPE_PODCAST_SHOW))
    plain = plain_text_runs(runs)
    return PodcastEpisodeItem(
        title=run_text(title_runs[0]) if title_runs else "",
        # Episodes link through their title run, not the item itself.
        browse_id=run_browse_id(title_runs[0]) if title_runs else "",
        video_id=item_video_id(item) or "",
        date=run_text(plain[0]) if plain else "",
        show=show,
        show_id=show_id,
        thumbnails=thumbnail_list(item),
    )


def normalize_profile(item: Any) -> ProfileItem:
    plain = plain_text_runs(column_runs(item, 1))
    return ProfileItem(
        name=_title(item),
        browse_id=item_browse_id(item) or "",
        handle=_first_matching(plain, lambda text: text.startswith("@")),
        thumbnails=thumbnail_list(item),
    )


def normalize_community_playlist(item: Any) -> CommunityPlaylistItem:
    runs = column_runs(item, 1)
    creator, creator_id = _text_and_id(find_run_with_browse(runs))
    return CommunityPlaylistItem(
        title=_title(item),
        browse_id=item_browse_id(item) or "",
        creator=creator,
        creator_id=creator_id,
        views=_first_matching(plain_text_runs(runs), lambda text: "view" in text.lower()),
        playlist_id=item_playlist_id(item) or "",
        thumbnails=thumbnail_list(item),
    )


Normalizer = Callable[[Any], NormalizedItem]

NORMALIZERS: Dict[SearchCategory, Normalizer] = {
    SearchCategory.SONGS: normalize_song,
    SearchCategory.VIDEOS: normalize_video,
    SearchCategory.ARTISTS: normalize_artist,
    SearchCategory.ALBUMS: normalize_album,
    SearchCategory.PODCASTS: normalize_podcast,
    SearchCategory.PODCAST_EPISODES: normalize_podcast_episode,
    SearchCategory.PROFILES: normalize_profile,
    SearchCategory.COMMUNITY_PLAYLISTS: normalize_community_playlist,
}

_missing = set(SearchCategory) - set(NORMALIZERS)
if _missing:
    raise RuntimeError(f"No normalizer registered for: {sorted(c.value for c in _missing)}")


def normalize_item(category: SearchCategory, item: Any) -> NormalizedItem:
    return NORMALIZERS[category](item)
