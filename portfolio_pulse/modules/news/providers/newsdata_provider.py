from __future__ import annotations

from typing import Dict

import httpx
from pydantic import ValidationError as PydanticValidationError

from portfolio_pulse.config import NewsConfig
from portfolio_pulse.core.errors import NewsFetchError
from portfolio_pulse.core.types import NewsResponse
from portfolio_pulse.infra.http.client import HttpClient


class NewsDataProvider:
    provider_id = "newsdata"

    def __init__(self, news_config: NewsConfig, client: HttpClient) -> None:
        self.news_config = news_config
        self.client = client

    async def fetch(self, params: Dict[str, str]) -> NewsResponse:
        try:
            payload = await self.client.get_json(self.news_config.base_url, params=params)
        except httpx.HTTPStatusError as exc:
            raise NewsFetchError(f"Error: {exc.response.status_code}") from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise NewsFetchError(f"News request failed: {exc}") from exc

        if not isinstance(payload, dict):
            raise NewsFetchError("News response is not a JSON object")
        try:
            return NewsResponse.model_validate(payload)
        except PydanticValidationError as exc:
            raise NewsFetchError(f"Invalid news payload: {exc.error_count()} field errors") from exc
