"""Example payloads returned when a provider has no usable credential.

Every value here is deterministic for a given input and visibly synthetic, so
the frontend can keep working (and tell the user why) without live keys.
"""
from typing import Any, Dict

EXAMPLE_CHANNEL_TITLE = "Example Channel"
EXAMPLE_DESCRIPTION = (
    "This is an example description because no YouTube API key is configured."
)


def example_translation(text: str) -> str:
    return f"[example translation: {text}]"


def example_thumbnail_url(video_id: str) -> str:
    return f"https://img.youtube.com/vi/{video_id}/mqdefault.jpg"


def example_video_info(video_id: str) -> Dict[str, Any]:
    return {
        "title": f"Example video: {video_id}",
        "channelTitle": EXAMPLE_CHANNEL_TITLE,
        "description": EXAMPLE_DESCRIPTION,
        "thumbnails": {"medium": {"url": example_thumbnail_url(video_id)}},
        "duration": "PT0M0S",
        "viewCount": "0",
        "publishedAt": None,
    }
