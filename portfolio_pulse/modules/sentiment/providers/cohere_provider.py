from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from portfolio_pulse.config import GenerationProviderConfig
from portfolio_pulse.core.errors import GenerationError
from portfolio_pulse.core.types import GenerationRequest
from portfolio_pulse.infra.http.client import HttpClient


class CohereGenerationProvider:
    provider_id = "cohere"

    def __init__(self, provider_config: GenerationProviderConfig, client: HttpClient) -> None:
        self.provider_config = provider_config
        self.client = client

    @property
    def generate_url(self) -> str:
        return f"{self.provider_config.base_url.rstrip('/')}/generate"

    async def generate(self, request: GenerationRequest, api_key: Optional[str] = None) -> str:
        if not api_key:
            raise GenerationError("API key is required for cohere provider")

        body: Dict[str, Any] = {"model": self.provider_config.model}
        body.update(request.model_dump(exclude_none=True))
        try:
            data = await self.client.post_json(
                self.generate_url,
                payload=body,
                headers={
                    "Authorization": f"Bearer {api_key}",
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
                timeout=self.provider_config.timeout,
            )
        except httpx.HTTPStatusError as exc:
            raise GenerationError(
                f"Generation failed ({exc.response.status_code}): {exc.response.text[:200]}"
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise GenerationError(f"Generation request failed: {exc}") from exc

        return self._first_generation(data)

    @staticmethod
    def _first_generation(data: Any) -> str:
        generations = data.get("generations") if isinstance(data, dict) else None
        if not isinstance(generations, list) or not generations:
            raise GenerationError("No generations in response")
        first = generations[0]
        text = first.get("text") if isinstance(first, dict) else None
        if not isinstance(text, str):
            raise GenerationError("Generation text missing from response")
        return text.strip()
