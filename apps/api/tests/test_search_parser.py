"""Tests for search response assembly and the top-result card."""

from __future__ import annotations

import pytest

from ytmusic_api.parsers.search import parse_search_response
from ytmusic_api.parsers.top_result import normalize_top_result
from ytmusic_api.parsers.types import PAGE_TYPE_ARTIST, PAGE_TYPE_PLAYLIST

from ytm_payloads import card, list_item, run, search_response, shelf


def _song(title: str, video_id: str = "v1"):
    return list_item(
        [run(title)],
        [run("Song"), run(" • "), run("Artist", browse_id="UC1", page_type=PAGE_TYPE_ARTIST), run(" • "), run("3:00")],
        [run("1M plays")],
        video_id=video_id,
    )


def _video(title: str):
    return list_item([run(title)], [run("Video"), run(" • "), run("2M views"), run(" • "), run("4:00")], video_id="vv")


UNRECOGNIZED = list_item([run("Mystery")], [run("Something else")])


class TestSoftFailure:
    @pytest.mark.parametrize(
        "raw",
        [
            None,
            {},
            {"contents": {}},
            {"contents": {"tabbedSearchResultsRenderer": {}}},
            {"contents": {"tabbedSearchResultsRenderer": {"tabs": []}}},
            {"contents": {"tabbedSearchResultsRenderer": {"tabs": [{"tabRenderer": {}}]}}},
            search_response(),
        ],
    )
    def test_missing_sections_yield_empty_results(self, raw):
        result = parse_search_response(raw, "all")
        assert result.results == []
        assert result.top_result is None

    def test_sections_without_known_renderers_are_skipped(self):
        raw = search_response({"itemSectionRenderer": {}}, {"musicShelfRenderer": {"contents": "bad"}})
        assert parse_search_response(raw, "all").results == []


class TestAllSearch:
    def test_shelf_title_detection_and_order(self):
        raw = search_response(
            shelf("Songs", _song("One"), _song("Two")),
            shelf("Videos", _video("Three")),
        )
        result = parse_search_response(raw, "all")
        assert [(item.type, item.title) for item in result.results] == [
            ("song", "One"),
            ("song", "Two"),
            ("video", "Three"),
        ]

    def test_shelf_title_overrides_item_shape(self):
        raw = search_response(shelf("Songs", _video("Looks like a video")))
        result = parse_search_response(raw, "all")
        assert result.results[0].type == "song"

    def test_untitled_shelf_uses_item_shape(self):
        playlist = list_item(
            [run("Mix")],
            [run("Someone", browse_id="UC2")],
            browse_id="VLPL1",
            page_type=PAGE_TYPE_PLAYLIST,
        )
        raw = search_response(shelf(None, _video("Clip"), playlist))
        result = parse_search_response(raw, "all")
        assert [item.type for item in result.results] == ["video", "community_playlist"]

    def test_unrecognized_item_is_dropped_without_stopping(self):
        raw = search_response(shelf("Top results", _song("Before"), UNRECOGNIZED, _video("After")))
        result = parse_search_response(raw, "all")
        assert [item.title for item in result.results] == ["Before", "After"]

    def test_non_item_entries_are_skipped(self):
        raw = search_response(
            {"musicShelfRenderer": {"contents": [{"continuationItemRenderer": {}}, None]}}
        )
        assert parse_search_response(raw, "all").results == []


class TestFilteredSearch:
    def test_requested_type_is_used_for_every_item(self):
        raw = search_response(shelf("Top results", _video("A"), UNRECOGNIZED))
        result = parse_search_response(raw, "songs")
        assert [(item.type, item.title) for item in result.results] == [("song", "A"), ("song", "Mystery")]

    def test_unknown_type_is_rejected(self):
        with pytest.raises(ValueError):
            parse_search_response(search_response(), "lyrics")


class TestTopResult:
    def test_card_becomes_top_result_with_more(self):
        raw = search_response(
            card(
                "Espresso",
                [run("Song"), run(" • "), run("Sabrina Carpenter")],
                _song("Espresso (Remix)", "v2"),
                UNRECOGNIZED,
                on_tap={"watchEndpoint": {"videoId": "eVli-tstM5E"}},
            ),
            shelf("Songs", _song("Espresso")),
        )
        result = parse_search_response(raw, "all")
        top = result.top_result
        assert top.type == "song"
        assert top.title == "Espresso"
        assert top.subtitle == "Song • Sabrina Carpenter"
        assert top.video_id == "eVli-tstM5E"
        assert top.browse_id == ""
        assert [t.width for t in top.thumbnails] == [60, 120]
        assert [item.title for item in top.more] == ["Espresso (Remix)"]
        assert [item.title for item in result.results] == ["Espresso"]

    def test_last_card_wins(self):
        raw = search_response(card("First", [run("Artist")]), card("Second", [run("Album")]))
        assert parse_search_response(raw, "all").top_result.title == "Second"

    @pytest.mark.parametrize(
        "first_word,expected",
        [
            ("Song", "song"),
            ("Video", "video"),
            ("Artist", "artist"),
            ("Album", "album"),
            ("Playlist", "community_playlist"),
            ("Episode", "unknown"),
        ],
    )
    def test_card_type_from_subtitle(self, first_word, expected):
        top = normalize_top_result(card("X", [run(first_word)])["musicCardShelfRenderer"])
        assert top.type == expected

    def test_browse_target_and_empty_more(self):
        renderer = card("Sabrina Carpenter", [run("Artist")], on_tap={"browseEndpoint": {"browseId": "UCsab"}})
        top = normalize_top_result(renderer["musicCardShelfRenderer"])
        assert top.browse_id == "UCsab"
        assert top.video_id == ""
        assert top.more is None
        assert "more" not in top.model_dump(by_alias=True)

    def test_bare_card(self):
        top = normalize_top_result({})
        assert top.model_dump(by_alias=True) == {
            "type": "unknown",
            "title": "",
            "subtitle": "",
            "videoId": "",
            "browseId": "",
            "thumbnails": [],
        }
