"""Per-holding news with sentiment routes."""

from __future__ import annotations

from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Query

from portfolio_pulse.api.deps import (
    build_http_client,
    build_portfolio_news_service,
    get_config,
    get_http_transport,
    get_news_cache,
    get_portfolio_service,
    get_settings,
)
from portfolio_pulse.config import AppConfig
from portfolio_pulse.modules.news.cache import NewsCache
from portfolio_pulse.modules.portfolio.service import PortfolioService
from portfolio_pulse.modules.portfolio_news.schemas import PortfolioNewsView
from portfolio_pulse.settings import AppSettings

router = APIRouter(prefix="/api", tags=["portfolio-news"])


@router.get("/portfolio/news", response_model=PortfolioNewsView)
async def portfolio_news(
    symbols: Optional[str] = Query(None, description="Comma separated symbols; defaults to a fresh portfolio."),
    config: AppConfig = Depends(get_config),
    settings: AppSettings = Depends(get_settings),
    cache: NewsCache = Depends(get_news_cache),
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_http_transport),
) -> PortfolioNewsView:
    if symbols is not None:
        symbol_list = [item.strip().upper() for item in symbols.split(",") if item.strip()]
    else:
        portfolio = await portfolio_service.fetch_portfolio()
        symbol_list = portfolio.symbols

    async with build_http_client(config, transport=transport) as client:
        service = build_portfolio_news_service(config, settings, client, cache)
        return await service.load(symbol_list)
