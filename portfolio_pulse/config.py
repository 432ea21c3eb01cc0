from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class NewsConfig(BaseModel):
    default_provider: str = "newsdata"
    base_url: str = "https://newsdata.io/api/1/news"
    country: str = "in"
    category: str = "business"
    language: str = "en"
    cache_ttl_minutes: int = Field(default=30, ge=1, le=24 * 60)


class GenerationProviderConfig(BaseModel):
    provider_id: str
    type: str = "cohere"
    base_url: str = "https://api.cohere.ai/v1"
    model: str = "command"
    timeout: int = Field(default=20, ge=3, le=120)
    enabled: bool = True


class SentimentConfig(BaseModel):
    default_provider: str = "cohere"
    primary_confidence: float = Field(default=0.8, ge=0.0, le=1.0)
    fallback_confidence: float = Field(default=0.7, ge=0.0, le=1.0)
    providers: List[GenerationProviderConfig] = Field(default_factory=list)


class PortfolioConfig(BaseModel):
    seed: Optional[int] = None
    fetch_delay_seconds: float = Field(default=0.8, ge=0.0, le=10.0)
    mutation_delay_seconds: float = Field(default=0.5, ge=0.0, le=10.0)
    search_delay_seconds: float = Field(default=0.3, ge=0.0, le=10.0)
    min_stocks: int = Field(default=3, ge=1, le=25)
    max_stocks: int = Field(default=6, ge=1, le=25)


class PresentationConfig(BaseModel):
    articles_per_tab: int = Field(default=6, ge=1, le=50)


def default_generation_providers() -> List[GenerationProviderConfig]:
    return [
        GenerationProviderConfig(
            provider_id="cohere",
            type="cohere",
            base_url="https://api.cohere.ai/v1",
            model="command",
            timeout=20,
            enabled=True,
        ),
        GenerationProviderConfig(
            provider_id="mock",
            type="mock",
            base_url="",
            model="mock-command",
            timeout=5,
            enabled=True,
        ),
    ]


class AppConfig(BaseModel):
    config_file: Path = Path("config/settings.yaml")
    request_timeout_seconds: int = Field(default=20, ge=3, le=120)
    user_agent: str = "portfolio-pulse/0.1"
    news: NewsConfig = Field(default_factory=NewsConfig)
    sentiment: SentimentConfig = Field(
        default_factory=lambda: SentimentConfig(providers=default_generation_providers())
    )
    portfolio: PortfolioConfig = Field(default_factory=PortfolioConfig)
    presentation: PresentationConfig = Field(default_factory=PresentationConfig)

    def normalized(self) -> "AppConfig":
        payload = self.model_dump(mode="python")
        payload["config_file"] = Path(payload["config_file"])
        portfolio = payload["portfolio"]
        if portfolio["min_stocks"] > portfolio["max_stocks"]:
            portfolio["min_stocks"], portfolio["max_stocks"] = (
                portfolio["max_stocks"],
                portfolio["min_stocks"],
            )
        providers = payload["sentiment"]["providers"]
        if not providers:
            payload["sentiment"]["providers"] = [
                provider.model_dump(mode="python") for provider in default_generation_providers()
            ]
        return AppConfig.model_validate(payload)

    def generation_provider_map(self) -> Dict[str, GenerationProviderConfig]:
        return {provider.provider_id: provider for provider in self.sentiment.providers if provider.enabled}


def default_app_config() -> AppConfig:
    return AppConfig(sentiment=SentimentConfig(providers=default_generation_providers()))
