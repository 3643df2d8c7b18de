"""
Lyrics API

Endpoints:
    - GET /lyrics/{video_id} : lyrics text for a YouTube video ID
"""

from __future__ import annotations

from typing import Union

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from ...core.errors import error_response
from ...core.logger import get_logger
from ...schemas.common import ErrorResponse
from ...schemas.lyrics import LyricsNotFoundResponse, LyricsResponse
from ...services.ytmusic import ytmusic_service

router = APIRouter(tags=["Lyrics"])
logger = get_logger("api.lyrics")

LYRICS_NOT_FOUND = "Lyrics not found for this video."


@router.get(
    "/lyrics/{video_id}",
    response_model=LyricsResponse,
    summary="Get song lyrics",
    description="Retrieve lyrics for a song using its YouTube video ID.",
    responses={404: {"model": LyricsNotFoundResponse}, 500: {"model": ErrorResponse}},
)
async def get_lyrics(video_id: str) -> Union[LyricsResponse, JSONResponse]:
    try:
        logger.info("GET /lyrics received: video_id=%s", video_id)
        result = await run_in_threadpool(ytmusic_service.get_lyrics, video_id)
    except Exception as exc:
        logger.exception("GET /lyrics failed: video_id=%s error=%s", video_id, exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    if not result.lyrics:
        logger.info("GET /lyrics not found: video_id=%s browse_id=%s", video_id, result.browse_id)
        return error_response(404, LYRICS_NOT_FOUND, videoId=video_id)

    logger.info("GET /lyrics completed: video_id=%s lyrics_len=%d", video_id, len(result.lyrics))
    return LyricsResponse(video_id=video_id, browse_id=result.browse_id or "", lyrics=result.lyrics)
