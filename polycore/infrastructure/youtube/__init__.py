from polycore.infrastructure.youtube.data_api import YouTubeDataApiClient, reshape_video_item

__all__ = ["YouTubeDataApiClient", "reshape_video_item"]
