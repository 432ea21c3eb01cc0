from __future__ import annotations

import logging
from typing import Optional, Sequence

from portfolio_pulse.config import AppConfig, GenerationProviderConfig
from portfolio_pulse.core.contracts import GenerationProvider
from portfolio_pulse.core.errors import PortfolioPulseError, ProviderNotFoundError
from portfolio_pulse.core.registry import ProviderRegistry
from portfolio_pulse.core.types import GenerationRequest, SentimentLabel, SentimentResult
from portfolio_pulse.infra.http.client import HttpClient
from portfolio_pulse.modules.sentiment.keyword_classifier import classify_keywords, normalize_label
from portfolio_pulse.modules.sentiment.prompt_builder import (
    build_classification_request,
    build_summary_request,
)
from portfolio_pulse.modules.sentiment.providers.cohere_provider import CohereGenerationProvider
from portfolio_pulse.modules.sentiment.providers.mock_provider import MockGenerationProvider

logger = logging.getLogger(__name__)

EMPTY_HEADLINES_SUMMARY = "No news headlines available for analysis."
UNAVAILABLE_SUMMARY = "Unable to analyze sentiment at this time."


class SentimentService:
    """Classifies a symbol's headline batch and writes a short investor summary.

    The remote generation provider is asked for a one-word label first. When
    that call fails or returns something unusable, a keyword count decides the
    label instead. The summary call is attempted either way and degrades to a
    canned sentence on failure. ``analyze`` never raises.
    """

    MODULE_NAME = "sentiment"

    def __init__(
        self,
        config: AppConfig,
        client: Optional[HttpClient],
        registry: ProviderRegistry,
        api_key: Optional[str] = None,
    ) -> None:
        self.config = config
        self.client = client
        self.registry = registry
        self.api_key = api_key
        self.registry.register(self.MODULE_NAME, "cohere", self._build_cohere_provider)
        self.registry.register(self.MODULE_NAME, "mock", self._build_mock_provider)

    def _provider_config(self, provider_id: str) -> GenerationProviderConfig:
        provider_config = self.config.generation_provider_map().get(provider_id)
        if provider_config is None:
            raise ProviderNotFoundError(f"Generation provider not configured or disabled: {provider_id}")
        return provider_config

    def _build_cohere_provider(self, provider_config: GenerationProviderConfig):
        if self.client is None:
            raise ProviderNotFoundError("cohere provider requires an HTTP client")
        return CohereGenerationProvider(provider_config=provider_config, client=self.client)

    def _build_mock_provider(self, provider_config: GenerationProviderConfig):
        return MockGenerationProvider()

    async def analyze(self, headlines: Sequence[str]) -> SentimentResult:
        if not headlines:
            logger.info("no headlines provided for sentiment analysis")
            return SentimentResult(
                sentiment="Neutral",
                confidence=0.0,
                summary=EMPTY_HEADLINES_SUMMARY,
            )

        text = "\n".join(headlines)
        try:
            try:
                raw_label = await self._generate(build_classification_request(text))
            except PortfolioPulseError as exc:
                logger.warning("sentiment classification failed, using keyword fallback: %s", exc)
                return await self._analyze_with_fallback(text)

            sentiment = normalize_label(raw_label)
            summary = await self._summarize(text, sentiment)
            return SentimentResult(
                sentiment=sentiment,
                confidence=self.config.sentiment.primary_confidence,
                summary=summary,
            )
        except Exception as exc:
            logger.exception("sentiment analysis failed")
            return SentimentResult(
                sentiment="Neutral",
                confidence=0.0,
                summary=UNAVAILABLE_SUMMARY,
                error=str(exc) or exc.__class__.__name__,
            )

    async def _analyze_with_fallback(self, text: str) -> SentimentResult:
        sentiment = self.fallback_sentiment(text)
        summary = await self._summarize(text, sentiment)
        return SentimentResult(
            sentiment=sentiment,
            confidence=self.config.sentiment.fallback_confidence,
            summary=summary,
        )

    @staticmethod
    def fallback_sentiment(text: str) -> SentimentLabel:
        return classify_keywords(text)

    async def _summarize(self, text: str, sentiment: SentimentLabel) -> str:
        try:
            summary = await self._generate(build_summary_request(text, sentiment))
        except PortfolioPulseError as exc:
            logger.warning("summary generation failed: %s", exc)
            summary = ""
        if not summary:
            return f"The sentiment appears to be {sentiment.lower()}."
        return summary

    async def _generate(self, request: GenerationRequest) -> str:
        provider_cfg = self._provider_config(self.config.sentiment.default_provider)
        provider: GenerationProvider = self.registry.resolve(
            self.MODULE_NAME,
            provider_cfg.type,
            provider_config=provider_cfg,
        )
        api_key = None if provider_cfg.type == "mock" else self.api_key
        return await provider.generate(request, api_key=api_key)
