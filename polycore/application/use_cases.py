import logging
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from polycore.application.credentials import (
    CredentialResolver,
    PROVIDER_TRANSLATION,
    PROVIDER_VIDEO_INFO,
)
from polycore.application.fallbacks import example_translation, example_video_info
from polycore.application.ports.subtitle_provider import SubtitleProvider
from polycore.application.ports.translation_provider import TranslationProvider
from polycore.application.ports.video_info_provider import VideoInfoProvider
from polycore.application.serializers import SOURCE_EXAMPLE, SOURCE_LIVE
from polycore.core.exceptions import AdapterLoadError, ProviderError

SUBTITLES_LOAD_ERROR = "server error loading API"
TRANSLATION_ERROR = "translation failed"
VIDEO_INFO_ERROR = "error fetching video info"


class TranslateTextUseCase:
    def __init__(
        self,
        resolver: CredentialResolver,
        translator: TranslationProvider,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self._resolver = resolver
        self._translator = translator
        self._log = log or logging.getLogger("polycore.translate")

    async def execute(self, text: str, target_language: str) -> Tuple[str, str]:
        if not self._resolver.is_configured(PROVIDER_TRANSLATION):
            self._log.warning("Translation key not configured, returning example translation")
            return example_translation(text), SOURCE_EXAMPLE

        try:
            translation = await self._translator.translate(text, target_language)
        except Exception as e:
            self._log.exception("Translation failed target=%s: %s", target_language, e)
            raise ProviderError(TRANSLATION_ERROR, details=str(e))

        self._log.info("Translation done target=%s chars=%d", target_language, len(text))
        return translation, SOURCE_LIVE


class GetVideoInfoUseCase:
    def __init__(
        self,
        resolver: CredentialResolver,
        provider: VideoInfoProvider,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self._resolver = resolver
        self._provider = provider
        self._log = log or logging.getLogger("polycore.video_info")

    async def execute(self, video_id: str) -> Tuple[Dict[str, Any], str]:
        if not self._resolver.is_configured(PROVIDER_VIDEO_INFO):
            self._log.warning("YouTube key not configured, returning example info video_id=%s", video_id)
            return example_video_info(video_id), SOURCE_EXAMPLE

        try:
            info = await self._provider.get_video_info(video_id)
        except Exception as e:
            message = e.message if isinstance(e, ProviderError) else str(e)
            self._log.exception("Video info failed video_id=%s: %s", video_id, message)
            raise ProviderError(f"{VIDEO_INFO_ERROR}: {message}", details=message)

        self._log.info("Video info fetched video_id=%s", video_id)
        return info, SOURCE_LIVE


class FetchSubtitlesUseCase:
    """Runs the registered subtitle provider; its envelope is passed through untouched."""

    def __init__(
        self,
        provider_factory: Callable[[], SubtitleProvider],
        log: Optional[logging.Logger] = None,
    ) -> None:
        self._provider_factory = provider_factory
        self._log = log or logging.getLogger("polycore.subtitles")

    async def execute(self, params: Mapping[str, str]) -> Dict[str, Any]:
        try:
            provider = self._provider_factory()
        except Exception as e:
            self._log.exception("Subtitle provider could not be created: %s", e)
            raise AdapterLoadError(SUBTITLES_LOAD_ERROR, details=str(e))

        try:
            return await provider.handle(params)
        except Exception as e:
            message = e.message if isinstance(e, ProviderError) else str(e)
            self._log.exception("Subtitle provider failed params=%s: %s", dict(params), message)
            raise AdapterLoadError(SUBTITLES_LOAD_ERROR, details=message)
