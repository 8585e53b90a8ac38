import asyncio
import logging
from typing import Any, Dict

import requests

from polycore.core.exceptions import ProviderError

YOUTUBE_VIDEOS_LIST = "https://www.googleapis.com/youtube/v3/videos"
VIDEO_PARTS = "snippet,contentDetails,statistics"

log = logging.getLogger("polycore.youtube")


def reshape_video_item(item: Dict[str, Any]) -> Dict[str, Any]:
    snippet = item.get("snippet") or {}
    details = item.get("contentDetails") or {}
    statistics = item.get("statistics") or {}
    return {
        "title": snippet.get("title"),
        "channelTitle": snippet.get("channelTitle"),
        "description": snippet.get("description"),
        "thumbnails": snippet.get("thumbnails"),
        "duration": details.get("duration"),
        "viewCount": statistics.get("viewCount"),
        "publishedAt": snippet.get("publishedAt"),
    }


class YouTubeDataApiClient:
    def __init__(self, api_key: str, *, timeout: float) -> None:
        self._api_key = api_key
        self._timeout = timeout

    def _fetch(self, video_id: str) -> Dict[str, Any]:
        response = requests.get(
            YOUTUBE_VIDEOS_LIST,
            params={"id": video_id, "key": self._api_key, "part": VIDEO_PARTS},
            timeout=self._timeout,
        )
        if not response.ok:
            raise ProviderError(f"provider error: {response.status_code} {response.reason}")

        try:
            data = response.json()
        except ValueError:
            raise ProviderError("provider error: malformed response body")

        items = data.get("items") if isinstance(data, dict) else None
        if not items:
            raise ProviderError("video not found")
        return reshape_video_item(items[0])

    async def get_video_info(self, video_id: str) -> Dict[str, Any]:
        log.info("Calling YouTube Data API video_id=%s", video_id)
        return await asyncio.to_thread(self._fetch, video_id)
