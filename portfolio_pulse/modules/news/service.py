from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional, Sequence

from portfolio_pulse.config import AppConfig
from portfolio_pulse.core.contracts import NewsProvider
from portfolio_pulse.core.errors import NewsFetchError
from portfolio_pulse.core.registry import ProviderRegistry
from portfolio_pulse.core.types import NewsResponse
from portfolio_pulse.infra.http.client import HttpClient
from portfolio_pulse.modules.news.cache import NewsCache, cache_signature
from portfolio_pulse.modules.news.providers.newsdata_provider import NewsDataProvider

logger = logging.getLogger(__name__)


class NewsService:
    MODULE_NAME = "news"

    def __init__(
        self,
        config: AppConfig,
        client: HttpClient,
        registry: ProviderRegistry,
        cache: NewsCache,
        api_key: Optional[str] = None,
    ) -> None:
        self.config = config
        self.client = client
        self.registry = registry
        self.cache = cache
        self.api_key = api_key or ""
        self.registry.register(self.MODULE_NAME, "newsdata", self._build_newsdata_provider)

    def _build_newsdata_provider(self):
        return NewsDataProvider(news_config=self.config.news, client=self.client)

    async def fetch_news(self, page: Optional[str] = None) -> NewsResponse:
        """Fetch one page of general business news, raising ``NewsFetchError`` on failure."""
        params = {
            "apikey": self.api_key,
            "country": self.config.news.country,
            "category": self.config.news.category,
        }
        if page:
            params["page"] = page
        return await self._fetch(params)

    async def fetch_news_envelope(self, page: Optional[str] = None) -> NewsResponse:
        """Same as ``fetch_news`` but failures come back as an error-status response."""
        try:
            return await self.fetch_news(page=page)
        except NewsFetchError as exc:
            logger.warning("news page fetch failed: %s", exc)
            return NewsResponse.failed(str(exc))

    async def fetch_news_for_symbols(self, symbols: Sequence[str]) -> Dict[str, NewsResponse]:
        unique_symbols: List[str] = list(dict.fromkeys(symbols))
        if not unique_symbols:
            return {}

        # One independent request per symbol; a failed symbol never aborts its siblings.
        settled = await asyncio.gather(
            *(self._fetch_symbol(symbol) for symbol in unique_symbols),
            return_exceptions=True,
        )
        output: Dict[str, NewsResponse] = {}
        for symbol, result in zip(unique_symbols, settled):
            if isinstance(result, Exception):
                logger.warning("news fetch failed for %s: %s", symbol, result)
                output[symbol] = NewsResponse.failed(str(result))
                continue
            output[symbol] = result
        return output

    async def _fetch_symbol(self, symbol: str) -> NewsResponse:
        params = {
            "apikey": self.api_key,
            "q": symbol,
            "country": self.config.news.country,
            "category": self.config.news.category,
            "language": self.config.news.language,
        }
        return await self._fetch(params)

    async def _fetch(self, params: Dict[str, str]) -> NewsResponse:
        key = cache_signature(params)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        provider: NewsProvider = self.registry.resolve(self.MODULE_NAME, self.config.news.default_provider)
        try:
            response = await provider.fetch(params)
        except NewsFetchError:
            raise
        except Exception as exc:
            raise NewsFetchError(f"News provider failed [{provider.provider_id}]: {exc}") from exc
        self.cache.put(key, response)
        return response
