from typing import Protocol


class TranslationProvider(Protocol):
    async def translate(self, text: str, target_language: str) -> str:
        ...
