"""YouTube Music API Service

FastAPI application that proxies YouTube Music's internal API and returns
clean, standardized JSON.

Technical Stack:
- Framework: FastAPI (async)
- Upstream: requests
- API Docs: OpenAPI 3

Core Services:
- Search
  * Songs, videos, artists, albums, podcasts, episodes, profiles, playlists
  * Best-match card with secondary matches
- Lyrics
  * Video ID -> lyrics browse ID -> lyrics text
"""

from typing import Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import info, lyrics, search
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logger import get_logger

# Configure logging
logger = get_logger()

# Initialize FastAPI application
app = FastAPI(
    title="YouTube Music API",
    description="Search YouTube Music and get lyrics as clean, standardized JSON.",
    version=settings.VERSION,
)

# CORS for browser clients
origins = settings.cors_origins_list
allow_credentials = False if origins == ["*"] else True
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register route handlers
app.include_router(search.router)
app.include_router(lyrics.router)
app.include_router(info.router)

register_exception_handlers(app)


@app.get(
    "/",
    response_model=Dict[str, str],
    summary="Service Health Check",
)
async def health_check() -> Dict[str, str]:
    return {
        "service": "YouTube Music API",
        "version": settings.VERSION,
        "status": "operational",
    }


def run() -> None:
    import uvicorn

    logger.info("Starting YouTube Music API on %s:%d", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
