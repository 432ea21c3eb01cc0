from __future__ import annotations

from typing import Dict, Optional, Protocol

from portfolio_pulse.core.types import GenerationRequest, NewsResponse


class NewsProvider(Protocol):
    provider_id: str

    async def fetch(self, params: Dict[str, str]) -> NewsResponse:
        ...


class GenerationProvider(Protocol):
    provider_id: str

    async def generate(self, request: GenerationRequest, api_key: Optional[str] = None) -> str:
        ...
