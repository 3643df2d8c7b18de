"""Tests for the raw-node field extractors."""

from __future__ import annotations

import pytest

from ytmusic_api.parsers import extractors as ex
from ytmusic_api.parsers.types import PAGE_TYPE_ALBUM, PAGE_TYPE_ARTIST

from ytm_payloads import list_item, run


SONG_ITEM = list_item(
    [run("Blinding Lights", video_id="vid-title")],
    [
        run("The Weeknd", browse_id="UC123", page_type=PAGE_TYPE_ARTIST),
        run(" • "),
        run("After Hours", browse_id="MPRE1", page_type=PAGE_TYPE_ALBUM),
        run(" • "),
        run("3:20"),
    ],
    [run("1.2B plays")],
    thumbnail_sizes=(60, 120),
)


class TestDig:
    def test_walks_dicts_and_lists(self):
        assert ex.dig({"a": [{"b": 1}]}, "a", 0, "b") == 1

    @pytest.mark.parametrize(
        "node,path",
        [
            (None, ("a",)),
            ({"a": None}, ("a", "b")),
            ({"a": []}, ("a", 0)),
            ({"a": {"b": 1}}, ("a", 0)),
            ({"a": [1]}, ("a", "b")),
            ("text", ("a",)),
        ],
    )
    def test_misses_return_none(self, node, path):
        assert ex.dig(node, *path) is None


class TestColumns:
    def test_column_runs(self):
        runs = ex.column_runs(SONG_ITEM, 1)
        assert [r["text"] for r in runs] == ["The Weeknd", " • ", "After Hours", " • ", "3:20"]

    def test_missing_column_is_empty(self):
        assert ex.column_runs(SONG_ITEM, 5) == []
        assert ex.column_runs({}, 0) == []

    def test_non_dict_runs_are_skipped(self):
        item = list_item(["junk", run("ok")])
        assert ex.column_runs(item, 0) == [run("ok")]

    def test_column_text_joins_in_order(self):
        assert ex.column_text(SONG_ITEM, 1) == "The Weeknd • After Hours • 3:20"
        assert ex.column_text(SONG_ITEM, 3) == ""

    def test_column_count(self):
        assert ex.column_count(SONG_ITEM) == 3
        assert ex.column_count({}) == 0


class TestRunSelection:
    def test_find_run_by_page_type(self):
        runs = ex.column_runs(SONG_ITEM, 1)
        assert ex.find_run_by_page_type(runs, PAGE_TYPE_ALBUM)["text"] == "After Hours"
        assert ex.find_run_by_page_type(runs, "MUSIC_PAGE_TYPE_PLAYLIST") is None

    def test_find_run_with_browse_ignores_page_type(self):
        runs = [run("plain"), run("Someone", browse_id="UC9")]
        assert ex.find_run_with_browse(runs)["text"] == "Someone"
        assert ex.find_run_with_browse([run("plain")]) is None

    def test_plain_text_runs_drop_links_and_separators(self):
        runs = ex.column_runs(SONG_ITEM, 1) + [run("   "), {"no": "text"}]
        assert [r["text"] for r in ex.plain_text_runs(runs)] == ["3:20"]

    def test_run_browse_id(self):
        assert ex.run_browse_id(run("x", browse_id="UC1")) == "UC1"
        assert ex.run_browse_id(run("x")) == ""


class TestThumbnails:
    def test_order_and_fields_preserved(self):
        thumbs = ex.thumbnail_list(SONG_ITEM)
        assert [t.model_dump() for t in thumbs] == [
            {"url": "https://lh3.example/60.jpg", "width": 60, "height": 60},
            {"url": "https://lh3.example/120.jpg", "width": 120, "height": 120},
        ]

    def test_missing_thumbnails(self):
        assert ex.thumbnail_list({}) == []
        assert ex.thumbnail_list({"thumbnail": {"musicThumbnailRenderer": {}}}) == []

    def test_malformed_entries_degrade(self):
        node = {
            "thumbnail": {
                "musicThumbnailRenderer": {"thumbnail": {"thumbnails": [{"url": 5, "width": "wide"}, "x"]}}
            }
        }
        thumbs = ex.thumbnail_list(node)
        assert len(thumbs) == 1
        assert thumbs[0].url == ""
        assert thumbs[0].width is None

    def test_fractional_sizes_kept_exact(self):
        node = {
            "thumbnail": {
                "musicThumbnailRenderer": {
                    "thumbnail": {"thumbnails": [{"url": "https://lh3.example/a.jpg", "width": 60.5, "height": 90}]}
                }
            }
        }
        (thumb,) = ex.thumbnail_list(node)
        assert thumb.model_dump() == {"url": "https://lh3.example/a.jpg", "width": 60.5, "height": 90}
        assert isinstance(thumb.height, int)


class TestIdentifiers:
    def test_video_id_prefers_item_data(self):
        item = list_item([run("T", video_id="from-run")], video_id="from-data", play_video_id="from-play")
        assert ex.item_video_id(item) == "from-data"

    def test_video_id_falls_back_to_play_button(self):
        item = list_item([run("T", video_id="from-run")], play_video_id="from-play")
        assert ex.item_video_id(item) == "from-play"

    def test_video_id_falls_back_to_title_run(self):
        assert ex.item_video_id(SONG_ITEM) == "vid-title"

    def test_video_id_missing(self):
        assert ex.item_video_id(list_item([run("T")])) is None

    def test_playlist_id_prefers_watch_playlist(self):
        item = list_item([run("T")], play_playlist_id="PL1")
        item["overlay"]["musicItemThumbnailOverlayRenderer"]["content"]["musicPlayButtonRenderer"][
            "playNavigationEndpoint"
        ]["watchEndpoint"] = {"playlistId": "PL2"}
        assert ex.item_playlist_id(item) == "PL1"

    def test_playlist_id_from_watch_endpoint(self):
        item = list_item([run("T")], play_video_id="v")
        item["overlay"]["musicItemThumbnailOverlayRenderer"]["content"]["musicPlayButtonRenderer"][
            "playNavigationEndpoint"
        ]["watchEndpoint"]["playlistId"] = "PL2"
        assert ex.item_playlist_id(item) == "PL2"
        assert ex.item_playlist_id({}) is None

    def test_browse_id_and_page_type(self):
        item = list_item([run("T")], browse_id="VL1", page_type="MUSIC_PAGE_TYPE_PLAYLIST")
        assert ex.item_browse_id(item) == "VL1"
        assert ex.item_page_type(item) == "MUSIC_PAGE_TYPE_PLAYLIST"
        assert ex.item_browse_id({}) is None
        assert ex.item_page_type({}) is None
