"""Assemble a normalized result set from a raw ``search`` response."""

from __future__ import annotations

from typing import Any, Optional

from ..schemas.items import SearchResultSet
from .detection import detect_item_category
from .extractors import dig, joined_text, runs_at
from .normalizers import normalize_item
from .top_result import normalize_top_result
from .types import SEARCH_TYPE_ALL, SearchCategory


def _section_list(raw_response: Any) -> list:
    tabs = dig(raw_response, "contents", "tabbedSearchResultsRenderer", "tabs")
    if not isinstance(tabs, list) or not tabs:
        return []
    sections = dig(tabs[0], "tabRenderer", "content", "sectionListRenderer", "contents")
    return sections if isinstance(sections, list) else []


def parse_search_response(raw_response: Any, search_type: str = SEARCH_TYPE_ALL) -> SearchResultSet:
    """Walk the section list once, in upstream order.

    A filtered search normalizes every shelf item with the requested
    category. An ``all`` search detects each item's category from the shelf
    title, then from the item shape, and drops items nothing matches.
    Missing structure anywhere yields an empty result set.
    """
    requested: Optional[SearchCategory] = None
    if search_type != SEARCH_TYPE_ALL:
        requested = SearchCategory(search_type)

    output = SearchResultSet()
    for section in _section_list(raw_response):
        card = dig(section, "musicCardShelfRenderer")
        if isinstance(card, dict):
            output.top_result = normalize_top_result(card)
            continue

        shelf = dig(section, "musicShelfRenderer")
        if not isinstance(shelf, dict):
            continue
        shelf_title = joined_text(runs_at(shelf, "title", "runs"))
        contents = shelf.get("contents")
        if not isinstance(contents, list):
            continue

        for content in contents:
            item = dig(content, "musicResponsiveListItemRenderer")
            if not isinstance(item, dict):
                continue
            category = requested or detect_item_category(item, shelf_title)
            if category is None:
                continue
            output.results.append(normalize_item(category, item))

    return output
