from typing import Dict, FrozenSet, Optional

from polycore.config import Settings

PROVIDER_SUBTITLE = "subtitle"
PROVIDER_TRANSLATION = "translation"
PROVIDER_VIDEO_INFO = "video-info"

# Stand-in values shipped in example .env files; a key equal to one of these
# was never actually filled in.
PLACEHOLDER_SECRETS: Dict[str, FrozenSet[str]] = {
    PROVIDER_TRANSLATION: frozenset({"sk-tu_api_key_aqui", "your_openai_api_key_here"}),
    PROVIDER_VIDEO_INFO: frozenset({"tu_youtube_api_key_aqui", "your_youtube_api_key_here"}),
}


class CredentialResolver:
    """Decides, per provider, whether a live call is possible."""

    def __init__(self, settings: Settings) -> None:
        self._secrets: Dict[str, Optional[str]] = {
            PROVIDER_TRANSLATION: settings.openai_api_key,
            PROVIDER_VIDEO_INFO: settings.youtube_api_key,
        }

    def secret(self, provider: str) -> Optional[str]:
        return self._secrets.get(provider)

    def is_configured(self, provider: str) -> bool:
        if provider == PROVIDER_SUBTITLE:
            # yt-dlp needs no key
            return True
        if provider not in self._secrets:
            raise KeyError(f"unknown provider: {provider}")

        value = (self._secrets[provider] or "").strip()
        if not value:
            return False
        return value not in PLACEHOLDER_SECRETS.get(provider, frozenset())

    def summary(self) -> Dict[str, bool]:
        return {name: self.is_configured(name) for name in self._secrets}
