import logging
from typing import Dict, Optional, Tuple

from openai import AsyncOpenAI

logger = logging.getLogger(__name__)

MAX_TOKENS = 150
TEMPERATURE = 0.3

LANGUAGE_NAMES = {
    "es": "Spanish",
    "en": "English",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "ru": "Russian",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese",
}


def language_name(code: str) -> str:
    return LANGUAGE_NAMES.get(code.strip().lower(), code)


def build_system_prompt(target_language: str) -> str:
    return (
        f"You are an expert translator. Translate the following text into {language_name(target_language)}. "
        "Keep the original tone and context. Reply with the translation only, without any explanation."
    )


class OpenAITranslator:
    def __init__(
        self,
        api_key: Optional[str],
        *,
        model: str,
        timeout: float,
        base_url: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout = timeout
        self._base_url = base_url
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        # Created on first use so an unconfigured key never reaches the SDK.
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._timeout,
                max_retries=0,
            )
        return self._client

    async def translate(self, text: str, target_language: str) -> str:
        completion = await self._get_client().chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": build_system_prompt(target_language)},
                {"role": "user", "content": text},
            ],
            max_tokens=MAX_TOKENS,
            temperature=TEMPERATURE,
        )

        if not completion.choices:
            return ""
        content = completion.choices[0].message.content
        translation = (content or "").strip()
        logger.debug("OpenAI translation model=%s -> %r", self._model, translation)
        return translation

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None


_TRANSLATOR_INSTANCES: Dict[Tuple[Optional[str], str, float, Optional[str]], OpenAITranslator] = {}


def get_openai_translator(
    api_key: Optional[str],
    *,
    model: str,
    timeout: float,
    base_url: Optional[str] = None,
) -> OpenAITranslator:
    key = (api_key, model, timeout, base_url)
    translator = _TRANSLATOR_INSTANCES.get(key)
    if translator is None:
        translator = OpenAITranslator(api_key, model=model, timeout=timeout, base_url=base_url)
        _TRANSLATOR_INSTANCES[key] = translator
    return translator


async def close_openai_translators() -> None:
    while _TRANSLATOR_INSTANCES:
        _, translator = _TRANSLATOR_INSTANCES.popitem()
        await translator.aclose()
