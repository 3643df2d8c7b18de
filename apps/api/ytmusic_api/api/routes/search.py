"""
Search API

Endpoints:
    - GET /search?q=<query>&type=<type> : search YouTube Music and return normalized items
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from starlette.concurrency import run_in_threadpool

from ...core.logger import get_logger
from ...parsers.types import SEARCH_TYPE_ALL, SEARCH_TYPES
from ...schemas.common import ErrorResponse
from ...schemas.search import SearchResponse
from ...services.ytmusic import ytmusic_service

router = APIRouter(tags=["Search"])
logger = get_logger("api.search")


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search YouTube Music",
    description="Search across songs, videos, artists, albums, podcasts, profiles and more.",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search(
    q: Optional[str] = Query(None, description="Search query", examples=["espresso sabrina carpenter"]),
    search_type: Optional[str] = Query(
        SEARCH_TYPE_ALL,
        alias="type",
        description=f"Filter type. Options: {', '.join(SEARCH_TYPES)}",
    ),
) -> SearchResponse:
    search_type = search_type or SEARCH_TYPE_ALL
    if not q:
        raise HTTPException(status_code=400, detail="Missing required parameter: q")
    if search_type not in SEARCH_TYPES:
        raise HTTPException(
            status_code=400,
            detail=f'Invalid type: "{search_type}". Valid types: {", ".join(SEARCH_TYPES)}',
        )

    try:
        logger.info("GET /search received: query_len=%d type=%s", len(q), search_type)
        result = await run_in_threadpool(ytmusic_service.search, query=q, search_type=search_type)
        logger.info(
            "GET /search completed: result_count=%d has_top_result=%s",
            len(result.results),
            result.top_result is not None,
        )
    except Exception as exc:
        logger.exception("GET /search failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return SearchResponse(
        query=q,
        type=search_type,
        top_result=result.top_result,
        results=result.results,
    )
