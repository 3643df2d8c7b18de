"""
API Info

Endpoints:
    - GET /api/info : static description of the available endpoints
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from ...core.config import settings
from ...parsers.types import SEARCH_TYPES

router = APIRouter(tags=["Info"])


@router.get("/api/info", response_model=Dict[str, Any], summary="API info")
async def api_info() -> Dict[str, Any]:
    return {
        "name": "YouTube Music API",
        "version": settings.VERSION,
        "endpoints": {
            "search": {
                "method": "GET",
                "path": "/search",
                "params": {
                    "q": "Search query (required)",
                    "type": f"Filter type (optional). Options: {', '.join(SEARCH_TYPES)}",
                },
                "example": "/search?q=espresso+sabrina+carpenter&type=songs",
            },
            "lyrics": {
                "method": "GET",
                "path": "/lyrics/:videoId",
                "params": {"videoId": "YouTube video ID (required)"},
                "example": "/lyrics/kIft-LUHHVA",
            },
        },
    }
