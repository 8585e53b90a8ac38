from polycore.infrastructure.translation.openai_translator import (
    OpenAITranslator,
    build_system_prompt,
    close_openai_translators,
    get_openai_translator,
    language_name,
)

__all__ = [
    "OpenAITranslator",
    "build_system_prompt",
    "close_openai_translators",
    "get_openai_translator",
    "language_name",
]
