import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from conftest import FakeTranslator
from polycore.config import Settings
from polycore.infrastructure.translation import (
    OpenAITranslator,
    build_system_prompt,
    close_openai_translators,
    get_openai_translator,
)


def test_translate_without_key_returns_example(make_client):
    """Without an OpenAI key the example translation is returned with 200."""
    client = make_client()
    response = client.post("/api/translate", json={"text": "Hello world"})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "translation": "[example translation: Hello world]",
        "source": "example",
    }


def test_translate_with_placeholder_key_returns_example(make_client, tmp_path):
    translator = FakeTranslator()
    client = make_client(
        settings_override=Settings(openai_api_key="sk-tu_api_key_aqui", static_dir=tmp_path),
        translator=translator,
    )
    response = client.post("/api/translate", json={"text": "  keep spacing ", "targetLanguage": "fr"})

    assert response.status_code == 200
    assert response.json()["source"] == "example"
    assert response.json()["translation"] == "[example translation:   keep spacing ]"
    assert translator.calls == []


@pytest.mark.parametrize("body", [{"text": ""}, {"text": "   \n\t"}, {}, {"text": 42}])
def test_translate_requires_text(make_client, body):
    client = make_client()
    response = client.post("/api/translate", json=body)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "text required"}


def test_translate_rejects_non_object_body(make_client):
    client = make_client()
    response = client.post("/api/translate", json=["not", "an", "object"])

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_translate_live(make_client, tmp_path):
    translator = FakeTranslator(result="Hola mundo")
    client = make_client(
        settings_override=Settings(openai_api_key="sk-live", static_dir=tmp_path),
        translator=translator,
    )
    response = client.post("/api/translate", json={"text": "Hello world"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "translation": "Hola mundo", "source": "live"}
    # targetLanguage defaults to Spanish
    assert translator.calls == [("Hello world", "es")]


def test_translate_live_empty_result_is_not_an_error(make_client, tmp_path):
    client = make_client(
        settings_override=Settings(openai_api_key="sk-live", static_dir=tmp_path),
        translator=FakeTranslator(result=""),
    )
    response = client.post("/api/translate", json={"text": "Hello", "targetLanguage": "de"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "translation": "", "source": "live"}


def test_translate_provider_failure(make_client, tmp_path):
    client = make_client(
        settings_override=Settings(openai_api_key="sk-live", static_dir=tmp_path),
        translator=FakeTranslator(error=RuntimeError("quota exceeded")),
    )
    response = client.post("/api/translate", json={"text": "Hello"})

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "translation failed",
        "details": "quota exceeded",
    }


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def test_openai_translator_request_shape():
    """Check the chat completion arguments and that the reply is trimmed."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=_completion("  Bonjour \n"))
    translator = OpenAITranslator("sk-live", model="gpt-test", timeout=5, client=client)

    result = asyncio.run(translator.translate("Hello", "fr"))

    assert result == "Bonjour"
    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "gpt-test"
    assert kwargs["max_tokens"] == 150
    assert kwargs["temperature"] == 0.3
    assert kwargs["messages"][0]["role"] == "system"
    assert "French" in kwargs["messages"][0]["content"]
    assert kwargs["messages"][1] == {"role": "user", "content": "Hello"}


def test_openai_translator_handles_missing_content():
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=_completion(None))
    translator = OpenAITranslator("sk-live", model="gpt-test", timeout=5, client=client)

    assert asyncio.run(translator.translate("Hello", "es")) == ""

    client.chat.completions.create = AsyncMock(return_value=SimpleNamespace(choices=[]))
    assert asyncio.run(translator.translate("Hello", "es")) == ""


def test_system_prompt_maps_known_codes_and_keeps_unknown():
    assert "Spanish" in build_system_prompt("es")
    assert "Klingon" in build_system_prompt("Klingon")


def test_openai_client_uses_timeout_without_retries():
    with patch("polycore.infrastructure.translation.openai_translator.AsyncOpenAI") as mock_client_cls:
        mock_client_cls.return_value.chat.completions.create = AsyncMock(return_value=_completion("Hola"))
        translator = OpenAITranslator("sk-live", model="gpt-test", timeout=7.5, base_url="https://llm.test/v1")

        assert asyncio.run(translator.translate("Hello", "es")) == "Hola"
        asyncio.run(translator.translate("Hello again", "es"))

    mock_client_cls.assert_called_once_with(
        api_key="sk-live",
        base_url="https://llm.test/v1",
        timeout=7.5,
        max_retries=0,
    )


def test_translator_is_shared_and_closed_on_shutdown():
    first = get_openai_translator("sk-shared", model="gpt-test", timeout=3)
    second = get_openai_translator("sk-shared", model="gpt-test", timeout=3)
    other = get_openai_translator("sk-other", model="gpt-test", timeout=3)

    assert first is second
    assert first is not other

    client = MagicMock()
    client.close = AsyncMock()
    first._client = client

    asyncio.run(close_openai_translators())

    client.close.assert_awaited_once()
    assert get_openai_translator("sk-shared", model="gpt-test", timeout=3) is not first
    asyncio.run(close_openai_translators())
