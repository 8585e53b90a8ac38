from fastapi import Depends

from polycore.application.credentials import (
    CredentialResolver,
    PROVIDER_TRANSLATION,
    PROVIDER_VIDEO_INFO,
)
from polycore.application.ports.subtitle_provider import SubtitleProvider
from polycore.application.ports.translation_provider import TranslationProvider
from polycore.application.ports.video_info_provider import VideoInfoProvider
from polycore.application.use_cases import (
    FetchSubtitlesUseCase,
    GetVideoInfoUseCase,
    TranslateTextUseCase,
)
from polycore.config import Settings, get_settings
from polycore.infrastructure.subtitles.ytdlp_subtitles import YtDlpSubtitleProvider
from polycore.infrastructure.translation import get_openai_translator
from polycore.infrastructure.youtube import YouTubeDataApiClient


def get_credential_resolver(settings: Settings = Depends(get_settings)) -> CredentialResolver:
    return CredentialResolver(settings)


def get_translator(
    settings: Settings = Depends(get_settings),
    resolver: CredentialResolver = Depends(get_credential_resolver),
) -> TranslationProvider:
    return get_openai_translator(
        resolver.secret(PROVIDER_TRANSLATION),
        model=settings.openai_model,
        timeout=settings.provider_timeout_sec,
        base_url=settings.openai_base_url,
    )


def get_video_info_provider(
    settings: Settings = Depends(get_settings),
    resolver: CredentialResolver = Depends(get_credential_resolver),
) -> VideoInfoProvider:
    return YouTubeDataApiClient(
        resolver.secret(PROVIDER_VIDEO_INFO) or "",
        timeout=settings.provider_timeout_sec,
    )


def get_subtitle_provider_factory(settings: Settings = Depends(get_settings)):
    def factory() -> SubtitleProvider:
        return YtDlpSubtitleProvider(timeout=settings.provider_timeout_sec)

    return factory


def get_translate_use_case(
    resolver: CredentialResolver = Depends(get_credential_resolver),
    translator: TranslationProvider = Depends(get_translator),
) -> TranslateTextUseCase:
    return TranslateTextUseCase(resolver, translator)


def get_video_info_use_case(
    resolver: CredentialResolver = Depends(get_credential_resolver),
    provider: VideoInfoProvider = Depends(get_video_info_provider),
) -> GetVideoInfoUseCase:
    return GetVideoInfoUseCase(resolver, provider)


def get_subtitles_use_case(
    factory=Depends(get_subtitle_provider_factory),
) -> FetchSubtitlesUseCase:
    return FetchSubtitlesUseCase(factory)
