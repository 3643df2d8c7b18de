"""Pydantic schemas for the lyrics API."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common import CamelModel


class LyricsResult(CamelModel):
    """Outcome of the two-step lyrics lookup; either value may be missing."""

    lyrics: Optional[str] = None
    browse_id: Optional[str] = None


class LyricsResponse(CamelModel):
    success: bool = True
    video_id: str = Field(..., description="YouTube video ID")
    browse_id: str = Field(..., description="Lyrics page browse ID")
    lyrics: str


class LyricsNotFoundResponse(CamelModel):
    success: bool = False
    error: str
    video_id: str
