"""Health and provider status routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from portfolio_pulse.api.deps import get_config
from portfolio_pulse.config import AppConfig

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@router.get("/options/providers")
async def provider_options(config: AppConfig = Depends(get_config)) -> dict:
    return {
        "news": config.news.default_provider,
        "sentiment": config.sentiment.default_provider,
        "sentiment_providers": sorted(config.generation_provider_map()),
    }
