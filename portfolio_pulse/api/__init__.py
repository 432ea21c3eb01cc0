"""Portfolio Pulse API package: FastAPI application factory."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from portfolio_pulse.api import health, news_feed, portfolio, portfolio_news
from portfolio_pulse.modules.news.cache import NewsCache
from portfolio_pulse.services.config_store import ConfigStore
from portfolio_pulse.settings import AppSettings

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[AppSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    settings = settings or AppSettings()
    config_store = ConfigStore(config_path=settings.config_file)

    app = FastAPI(
        title="Portfolio Pulse API",
        version="0.1.0",
        default_response_class=ORJSONResponse,
    )

    # ---------- state --------------------------------------------------------
    app.state.settings = settings
    app.state.config_store = config_store
    app.state.http_transport = transport
    app.state.portfolio_service = None
    # One cache per app instance; requests share it for the lifetime of the process.
    app.state.news_cache = NewsCache()

    # ---------- CORS ---------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- routers ------------------------------------------------------
    app.include_router(health.router)
    app.include_router(news_feed.router)
    app.include_router(portfolio.router)
    app.include_router(portfolio_news.router)

    # ---------- lifecycle events ---------------------------------------------
    @app.on_event("startup")
    async def startup_event() -> None:
        config = config_store.load()
        app.state.news_cache = NewsCache(ttl=timedelta(minutes=config.news.cache_ttl_minutes))
        if not settings.newsdata_api_key:
            logger.warning("PORTFOLIO_PULSE_NEWSDATA_API_KEY is not set; news requests will be rejected upstream")
        if not settings.cohere_api_key and config.sentiment.default_provider == "cohere":
            logger.warning("PORTFOLIO_PULSE_COHERE_API_KEY is not set; sentiment uses the keyword fallback")

    return app


app = create_app()
