from __future__ import annotations

from typing import Optional

from portfolio_pulse.core.types import GenerationRequest
from portfolio_pulse.modules.sentiment.keyword_classifier import classify_keywords


class MockGenerationProvider:
    provider_id = "mock"

    async def generate(self, request: GenerationRequest, api_key: Optional[str] = None) -> str:
        body = request.prompt
        if "Headlines:\n" in body:
            label = classify_keywords(body.split("Headlines:\n", 1)[1])
            return label.upper()

        news = body.split("News:\n", 1)[-1].split("\n\nSummary:", 1)[0]
        first_line = next((line.strip() for line in news.splitlines() if line.strip()), "")
        if not first_line:
            return "No material developments were reported."
        return f"Recent coverage is led by \"{first_line}\"; investors should weigh it against the broader trend."
