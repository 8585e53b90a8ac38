from typing import Protocol, Dict, Any


class VideoInfoProvider(Protocol):
    async def get_video_info(self, video_id: str) -> Dict[str, Any]:
        ...
