from typing import Any, Dict, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from polycore.config import Settings, get_settings
from polycore.infrastructure.providers import (
    get_subtitle_provider_factory,
    get_translator,
    get_video_info_provider,
)
from polycore.main import create_app


class FakeTranslator:
    def __init__(self, result: str = "hola", error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.calls: List[Tuple[str, str]] = []

    async def translate(self, text: str, target_language: str) -> str:
        self.calls.append((text, target_language))
        if self.error:
            raise self.error
        return self.result


class FakeVideoInfoProvider:
    def __init__(self, result: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None):
        self.result = result or {}
        self.error = error
        self.calls: List[str] = []

    async def get_video_info(self, video_id: str) -> Dict[str, Any]:
        self.calls.append(video_id)
        if self.error:
            raise self.error
        return self.result


class FakeSubtitleProvider:
    def __init__(self, envelope: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None):
        self.envelope = envelope or {"success": True, "data": {"subtitles": []}, "source": "live"}
        self.error = error
        self.calls: List[Dict[str, str]] = []

    async def handle(self, params):
        self.calls.append(dict(params))
        if self.error:
            raise self.error
        return self.envelope


CREDENTIAL_ENV_VARS = (
    "OPENAI_API_KEY",
    "VITE_OPENAI_API_KEY",
    "YOUTUBE_API_KEY",
    "VITE_YOUTUBE_API_KEY",
)


@pytest.fixture(autouse=True)
def clean_credentials(monkeypatch):
    for name in CREDENTIAL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings(tmp_path):
    return Settings(static_dir=tmp_path / "dist")


@pytest.fixture
def make_client(settings):
    """Build a TestClient with injected settings and optional fake providers."""
    apps = []

    def _make(
        settings_override: Optional[Settings] = None,
        translator=None,
        video_info_provider=None,
        subtitle_factory=None,
        raise_server_exceptions: bool = True,
    ) -> TestClient:
        app = create_app()
        active = settings_override or settings
        app.dependency_overrides[get_settings] = lambda: active
        if translator is not None:
            app.dependency_overrides[get_translator] = lambda: translator
        if video_info_provider is not None:
            app.dependency_overrides[get_video_info_provider] = lambda: video_info_provider
        if subtitle_factory is not None:
            app.dependency_overrides[get_subtitle_provider_factory] = lambda: subtitle_factory
        apps.append(app)
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    yield _make

    for app in apps:
        app.dependency_overrides.clear()
