from typing import Protocol, Dict, Any, Mapping


class SubtitleProvider(Protocol):
    async def handle(self, params: Mapping[str, str]) -> Dict[str, Any]:
        """Return a complete response envelope for the given query parameters."""
        ...
