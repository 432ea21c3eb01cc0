"""FastAPI dependency factories for service injection."""

from __future__ import annotations

from typing import Optional

import httpx
from fastapi import Request

from portfolio_pulse.config import AppConfig
from portfolio_pulse.core.registry import ProviderRegistry
from portfolio_pulse.infra.http.client import HttpClient
from portfolio_pulse.modules.news.cache import NewsCache
from portfolio_pulse.modules.news.service import NewsService
from portfolio_pulse.modules.portfolio.service import PortfolioService
from portfolio_pulse.modules.portfolio_news.service import PortfolioNewsService
from portfolio_pulse.modules.sentiment.service import SentimentService
from portfolio_pulse.services.config_store import ConfigStore
from portfolio_pulse.settings import AppSettings


def get_config(request: Request) -> AppConfig:
    config_store: ConfigStore = request.app.state.config_store
    return config_store.load()


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_news_cache(request: Request) -> NewsCache:
    return request.app.state.news_cache


def get_http_transport(request: Request) -> Optional[httpx.AsyncBaseTransport]:
    return getattr(request.app.state, "http_transport", None)


def get_portfolio_service(request: Request) -> PortfolioService:
    service = getattr(request.app.state, "portfolio_service", None)
    if service is None:
        # Built on first use so a configured seed drives one random stream per app.
        service = PortfolioService(config=get_config(request))
        request.app.state.portfolio_service = service
    return service


def build_http_client(
    config: AppConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> HttpClient:
    return HttpClient(
        timeout_seconds=config.request_timeout_seconds,
        user_agent=config.user_agent,
        transport=transport,
    )


def build_news_service(
    config: AppConfig,
    settings: AppSettings,
    client: HttpClient,
    cache: NewsCache,
    registry: ProviderRegistry | None = None,
) -> NewsService:
    return NewsService(
        config=config,
        client=client,
        registry=registry or ProviderRegistry(),
        cache=cache,
        api_key=settings.newsdata_api_key,
    )


def build_portfolio_news_service(
    config: AppConfig,
    settings: AppSettings,
    client: HttpClient,
    cache: NewsCache,
) -> PortfolioNewsService:
    registry = ProviderRegistry()
    return PortfolioNewsService(
        config=config,
        news_service=build_news_service(config, settings, client, cache, registry=registry),
        sentiment_service=SentimentService(
            config=config,
            client=client,
            registry=registry,
            api_key=settings.cohere_api_key,
        ),
    )
