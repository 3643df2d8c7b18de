"""YouTube Music internal API client.

Talks to the undocumented ``youtubei/v1`` endpoints used by the web player.
Every call is a single JSON POST on a fresh session, so no cookies or
connections carry over between calls; a non-2xx status or a transport failure
raises :class:`YTMusicAPIError`. No retries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests

from ..core.config import Settings
from ..core.errors import YTMusicAPIError
from ..core.logger import get_logger

logger = get_logger("ytmusic_client")

# Upstream filter params for each search type
SEARCH_PARAMS: Dict[str, Optional[str]] = {
    "all": None,
    "songs": "EgWKAQIIAWoSEAMQBRAEEBAQCRAVEAoQDhAR",
    "artists": "EgWKAQIgAWoSEAMQBRAEEBAQCRAVEAoQDhAR",
    "videos": "EgWKAQIQAWoSEAMQBRAEEBAQCRAVEAoQDhAR",
    "podcast_episodes": "EgWKAQJIAWoSEAMQBRAEEBAQCRAVEAoQDhAR",
    "albums": "EgWKAQIYAWoSEAMQBRAEEBAQCRAVEAoQDhAR",
    "profiles": "EgWKAQJYAWoSEAMQBRAEEBAQCRAVEAoQDhAR",
    "community_playlists": "EgeKAQQoAEABahIQAxAFEAQQEBAJEBUQChAOEBE%3D",
    "podcasts": "EgWKAQJQAWoSEAMQBRAEEBAQCRAVEAoQDhAR",
}


@dataclass(frozen=True)
class ClientContext:
    """Client identity sent in every request body."""

    client_name: str
    client_version: str
    browser_name: str
    browser_version: str

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClientContext":
        return cls(
            client_name=settings.YTM_CLIENT_NAME,
            client_version=settings.YTM_CLIENT_VERSION,
            browser_name=settings.YTM_BROWSER_NAME,
            browser_version=settings.YTM_BROWSER_VERSION,
        )

    def payload(self, *, full: bool = False) -> Dict[str, Any]:
        client: Dict[str, str] = {
            "clientName": self.client_name,
            "clientVersion": self.client_version,
        }
        if full:
            client["browserName"] = self.browser_name
            client["browserVersion"] = self.browser_version
        return {"client": client}


class YTMusicClient:
    def __init__(
        self,
        *,
        base_url: str,
        context: ClientContext,
        user_agent: str,
        timeout: Optional[float] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._context = context
        self._timeout = timeout
        self._session_factory = session_factory
        self._headers = {
            "Content-Type": "application/json",
            "User-Agent": user_agent,
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> "YTMusicClient":
        return cls(
            base_url=settings.YTM_BASE_URL,
            context=ClientContext.from_settings(settings),
            user_agent=settings.YTM_USER_AGENT,
            timeout=settings.YTM_TIMEOUT_SECONDS,
        )

    def _post(self, endpoint: str, body: Dict[str, Any]) -> Any:
        url = f"{self._base_url}/{endpoint}"
        logger.debug("POST %s", url)
        try:
            with self._session_factory() as session:
                resp = session.post(url, json=body, headers=self._headers, timeout=self._timeout)
        except requests.RequestException as exc:
            raise YTMusicAPIError(f"YouTube Music API request failed: {exc}") from exc

        if not resp.ok:
            logger.warning("POST %s returned %s %s", url, resp.status_code, resp.reason)
            raise YTMusicAPIError(
                f"YouTube Music API error: {resp.status_code} {resp.reason}",
                status_code=resp.status_code,
                reason=resp.reason or "",
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise YTMusicAPIError(f"YouTube Music API returned invalid JSON: {exc}") from exc

    def search(self, query: str, search_type: str = "all") -> Any:
        if search_type not in SEARCH_PARAMS:
            raise ValueError(f"Unknown search type: {search_type}")
        body: Dict[str, Any] = {"context": self._context.payload(), "query": query}
        params = SEARCH_PARAMS[search_type]
        if params:
            body["params"] = params
        return self._post("search", body)

    def next(self, video_id: str) -> Any:
        return self._post(
            "next?prettyPrint=false",
            {"videoId": video_id, "context": self._context.payload(full=True)},
        )

    def browse(self, browse_id: str) -> Any:
        return self._post(
            "browse",
            {"context": self._context.payload(full=True), "browseId": browse_id},
        )
