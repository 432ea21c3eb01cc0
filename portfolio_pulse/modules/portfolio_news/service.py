from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Dict, List, Sequence

from portfolio_pulse.config import AppConfig
from portfolio_pulse.core.types import NewsArticle, SentimentResult
from portfolio_pulse.modules.news.service import NewsService
from portfolio_pulse.modules.portfolio_news.schemas import PortfolioNewsView, StockNewsTab
from portfolio_pulse.modules.sentiment.service import SentimentService

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load news. Please try again later."
SENTIMENT_UNAVAILABLE_SUMMARY = "Sentiment analysis is currently unavailable."


class PortfolioNewsService:
    def __init__(
        self,
        config: AppConfig,
        news_service: NewsService,
        sentiment_service: SentimentService,
    ) -> None:
        self.config = config
        self.news_service = news_service
        self.sentiment_service = sentiment_service

    async def load(self, symbols: Sequence[str]) -> PortfolioNewsView:
        requested = list(dict.fromkeys(symbol for symbol in symbols if symbol))
        view = PortfolioNewsView(
            generated_at=datetime.now(timezone.utc),
            requested_symbols=requested,
        )
        if not requested:
            return view

        try:
            news_by_symbol = await self.news_service.fetch_news_for_symbols(requested)
            # Symbols whose fetch failed or returned nothing get no tab at all.
            articles_by_symbol: Dict[str, List[NewsArticle]] = {
                symbol: list(response.results)
                for symbol, response in news_by_symbol.items()
                if response.ok and response.results
            }
            view.active_tab = next(iter(articles_by_symbol), requested[0])
            sentiments = await self._analyze_all(articles_by_symbol)
        except Exception:
            logger.exception("portfolio news load failed")
            view.error = LOAD_FAILED_MESSAGE
            return view

        per_tab = self.config.presentation.articles_per_tab
        view.tabs = [
            StockNewsTab(
                symbol=symbol,
                article_count=len(articles),
                articles=articles[:per_tab],
                sentiment=sentiments.get(symbol),
            )
            for symbol, articles in articles_by_symbol.items()
        ]
        return view

    async def _analyze_all(self, articles_by_symbol: Dict[str, List[NewsArticle]]) -> Dict[str, SentimentResult]:
        symbols = list(articles_by_symbol)
        results = await asyncio.gather(
            *(self._analyze_symbol(symbol, articles_by_symbol[symbol]) for symbol in symbols)
        )
        return dict(zip(symbols, results))

    async def _analyze_symbol(self, symbol: str, articles: List[NewsArticle]) -> SentimentResult:
        headlines = [article.title for article in articles]
        logger.debug("analyzing %d headlines for %s", len(headlines), symbol)
        try:
            return await self.sentiment_service.analyze(headlines)
        except Exception as exc:
            logger.warning("sentiment analysis failed for %s: %s", symbol, exc)
            return SentimentResult(
                sentiment="Neutral",
                confidence=0.0,
                summary=SENTIMENT_UNAVAILABLE_SUMMARY,
                error=str(exc) or "Unknown error",
            )
