import asyncio
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import urlparse, parse_qs

import requests
import yt_dlp

from polycore.application.serializers import SOURCE_LIVE, success_envelope
from polycore.core.exceptions import ProviderError, ValidationError

DEFAULT_LANGUAGE = "en"
SUBTITLE_FORMAT = "json3"
WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

log = logging.getLogger("polycore.subtitles.ytdlp")


def extract_video_id(url: str) -> Optional[str]:
    parsed = urlparse(url)
    if parsed.netloc in ("youtu.be", "www.youtu.be"):
        vid = parsed.path.lstrip("/")
        return vid or None
    qs = parse_qs(parsed.query)
    if "v" in qs and qs["v"]:
        return qs["v"][0]
    return None


def _match_language(tracks: Dict[str, Any], lang: str) -> Optional[str]:
    if lang in tracks:
        return lang
    primary = lang.split("-")[0]
    for code in sorted(tracks):
        if code.split("-")[0] == primary:
            return code
    return None


def select_track(info: Dict[str, Any], lang: str) -> Optional[Tuple[str, bool, Dict[str, Any]]]:
    """Pick (language, auto_generated, format) preferring manual subtitles."""
    for auto, key in ((False, "subtitles"), (True, "automatic_captions")):
        tracks = info.get(key) or {}
        code = _match_language(tracks, lang)
        if code is None:
            continue
        formats = tracks[code] or []
        fmt = next((f for f in formats if f.get("ext") == SUBTITLE_FORMAT), None)
        if fmt and fmt.get("url"):
            return code, auto, fmt
    return None


def parse_json3(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    segments = []
    for event in payload.get("events") or []:
        segs = event.get("segs")
        if not segs:
            continue
        text = "".join(s.get("utf8", "") for s in segs).replace("\n", " ").strip()
        if not text:
            continue
        segments.append(
            {
                "start": event.get("tStartMs", 0) / 1000.0,
                "duration": event.get("dDurationMs", 0) / 1000.0,
                "text": text,
            }
        )
    return segments


class YtDlpSubtitleProvider:
    def __init__(self, *, timeout: float) -> None:
        self._timeout = timeout

    def _extract_info(self, video_id: str) -> Dict[str, Any]:
        ydl_opts = {
            "skip_download": True,
            "quiet": True,
            "no_warnings": True,
            "noplaylist": True,
            "socket_timeout": self._timeout,
        }
        try:
            with yt_dlp.YoutubeDL(ydl_opts) as ydl:
                return ydl.extract_info(WATCH_URL.format(video_id=video_id), download=False)
        except yt_dlp.utils.DownloadError as e:
            raise ProviderError(f"Download error: {e}")

    def _fetch(self, video_id: str, lang: str) -> Dict[str, Any]:
        info = self._extract_info(video_id)

        selected = select_track(info, lang)
        if selected is None:
            raise ProviderError(f"no subtitles available for language {lang}")
        code, auto, fmt = selected

        response = requests.get(fmt["url"], timeout=self._timeout)
        response.raise_for_status()
        segments = parse_json3(response.json())

        return {
            "videoId": video_id,
            "title": info.get("title"),
            "language": code,
            "autoGenerated": auto,
            "availableLanguages": sorted(
                set(info.get("subtitles") or {}) | set(info.get("automatic_captions") or {})
            ),
            "subtitles": segments,
        }

    async def handle(self, params: Mapping[str, str]) -> Dict[str, Any]:
        video_id = params.get("videoId")
        if not video_id and params.get("url"):
            video_id = extract_video_id(params["url"])
        if not video_id:
            raise ValidationError("videoId required")

        lang = (params.get("lang") or DEFAULT_LANGUAGE).strip()

        log.info("[SUBTITLES] lookup video_id=%s lang=%s", video_id, lang)
        data = await asyncio.to_thread(self._fetch, video_id, lang)
        log.info("[SUBTITLES] done video_id=%s segments=%d", video_id, len(data["subtitles"]))
        return success_envelope(SOURCE_LIVE, data=data)
