from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from portfolio_pulse.core.types import NewsArticle, SentimentResult


class StockNewsTab(BaseModel):
    symbol: str
    article_count: int
    articles: List[NewsArticle] = Field(default_factory=list)
    sentiment: Optional[SentimentResult] = None


class PortfolioNewsView(BaseModel):
    generated_at: datetime
    requested_symbols: List[str] = Field(default_factory=list)
    active_tab: Optional[str] = None
    tabs: List[StockNewsTab] = Field(default_factory=list)
    error: Optional[str] = None

    def tab(self, symbol: str) -> Optional[StockNewsTab]:
        return next((item for item in self.tabs if item.symbol == symbol), None)
