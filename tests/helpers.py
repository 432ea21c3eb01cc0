from __future__ import annotations

from typing import Any, Dict, List, Optional

from portfolio_pulse.config import AppConfig, PortfolioConfig


def fast_config(**updates: Any) -> AppConfig:
    config = AppConfig(
        portfolio=PortfolioConfig(
            seed=7,
            fetch_delay_seconds=0.0,
            mutation_delay_seconds=0.0,
            search_delay_seconds=0.0,
        )
    )
    return config.model_copy(update=updates) if updates else config


def article_payload(article_id: str, title: str, **extra: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "article_id": article_id,
        "title": title,
        "link": f"https://example.com/{article_id}",
        "description": None,
        "pubDate": "2024-03-05 15:07:00",
        "image_url": None,
        "source_name": "Example Wire",
        "category": ["business"],
    }
    payload.update(extra)
    return payload


def news_payload(titles: List[str], next_page: Optional[str] = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "status": "success",
        "totalResults": len(titles),
        "results": [article_payload(f"a{index}", title) for index, title in enumerate(titles)],
    }
    if next_page:
        payload["nextPage"] = next_page
    return payload
