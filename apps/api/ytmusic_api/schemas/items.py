"""Normalized search item schemas.

Every item variant carries a ``type`` tag and a fixed field set. Fields are
never absent: missing text is ``""`` and missing thumbnails are ``[]``.
"""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field, SerializationInfo, SerializerFunctionWrapHandler, model_serializer

from .common import CamelModel


class Thumbnail(CamelModel):
    url: str = ""
    width: Optional[Union[int, float]] = None
    height: Optional[Union[int, float]] = None


class SongItem(CamelModel):
    type: Literal["song"] = "song"
    title: str = ""
    video_id: str = ""
    artist: str = ""
    artist_id: str = ""
    album: str = ""
    album_id: str = ""
    duration: str = ""
    plays: str = ""
    thumbnails: List[Thumbnail] = Field(default_factory=list)


class VideoItem(CamelModel):
    type: Literal["video"] = "video"
    title: str = ""
    video_id: str = ""
    channel: str = ""
    channel_id: str = ""
    views: str = ""
    duration: str = ""
    thumbnails: List[Thumbnail] = Field(default_factory=list)


class ArtistItem(CamelModel):
    type: Literal["artist"] = "artist"
    name: str = ""
    browse_id: str = ""
    subscribers: str = ""
    thumbnails: List[Thumbnail] = Field(default_factory=list)


class AlbumItem(CamelModel):
    type: Literal["album"] = "album"
    title: str = ""
    browse_id: str = ""
    album_type: str = ""
    artist: str = ""
    artist_id: str = ""
    year: str = ""
    playlist_id: str = ""
    thumbnails: List[Thumbnail] = Field(default_factory=list)


class PodcastItem(CamelModel):
    type: Literal["podcast"] = "podcast"
    title: str = ""
    browse_id: str = ""
    publisher: str = ""
    publisher_id: str = ""
    playlist_id: str = ""
    thumbnails: List[Thumbnail] = Field(default_factory=list)


class PodcastEpisodeItem(CamelModel):
    type: Literal["podcast_episode"] = "podcast_episode"
    title: str = ""
    browse_id: str = ""
    video_id: str = ""
    date: str = ""
    show: str = ""
    show_id: str = ""
    thumbnails: List[Thumbnail] = Field(default_factory=list)


class ProfileItem(CamelModel):
    type: Literal["profile"] = "profile"
    name: str = ""
    browse_id: str = ""
    handle: str = ""
    thumbnails: List[Thumbnail] = Field(default_factory=list)


class CommunityPlaylistItem(CamelModel):
    type: Literal["community_playlist"] = "community_playlist"
    title: str = ""
    browse_id: str = ""
    creator: str = ""
    creator_id: str = ""
    views: str = ""
    playlist_id: str = ""
    thumbnails: List[Thumbnail] = Field(default_factory=list)


NormalizedItem = Annotated[
    Union[
        SongItem,
        VideoItem,
        ArtistItem,
        AlbumItem,
        PodcastItem,
        PodcastEpisodeItem,
        ProfileItem,
        CommunityPlaylistItem,
    ],
    Field(discriminator="type"),
]


class TopResult(CamelModel):
    """The best-match card, with optional secondary matches in ``more``."""

    type: str = "unknown"  # song | video | artist | album | community_playlist | unknown
    title: str = ""
    subtitle: str = ""
    video_id: str = ""
    browse_id: str = ""
    thumbnails: List[Thumbnail] = Field(default_factory=list)
    more: Optional[List[NormalizedItem]] = None

    @model_serializer(mode="wrap")
    def _omit_empty_more(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo):
        data = handler(self)
        if not self.more:
            data.pop("more", None)
        return data


class SearchResultSet(CamelModel):
    top_result: Optional[TopResult] = None
    results: List[NormalizedItem] = Field(default_factory=list)
