"""General business news feed routes."""

from __future__ import annotations

from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Query

from portfolio_pulse.api.deps import (
    build_http_client,
    build_news_service,
    get_config,
    get_http_transport,
    get_news_cache,
    get_settings,
)
from portfolio_pulse.api.errors import service_error_handler
from portfolio_pulse.config import AppConfig
from portfolio_pulse.core.types import NewsResponse
from portfolio_pulse.modules.news.cache import NewsCache
from portfolio_pulse.settings import AppSettings

router = APIRouter(prefix="/api", tags=["news-feed"])


@router.get("/news", response_model=NewsResponse)
@service_error_handler()
async def news_feed(
    page: Optional[str] = Query(None, min_length=1, max_length=200),
    config: AppConfig = Depends(get_config),
    settings: AppSettings = Depends(get_settings),
    cache: NewsCache = Depends(get_news_cache),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_http_transport),
) -> NewsResponse:
    async with build_http_client(config, transport=transport) as client:
        service = build_news_service(config, settings, client, cache)
        return await service.fetch_news(page=page)
