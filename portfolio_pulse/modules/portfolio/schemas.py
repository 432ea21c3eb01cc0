from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class CatalogStock(BaseModel):
    symbol: str
    name: str
    current_price: float
    change: float
    change_percent: float
    sector: Optional[str] = None


class Stock(BaseModel):
    symbol: str
    name: str
    quantity: int = Field(ge=1)
    avg_price: float
    current_price: float
    change: float
    change_percent: float
    sector: Optional[str] = None
    investment: float = 0.0
    current_value: float = 0.0
    gain: float = 0.0
    gain_percent: float = 0.0


class Portfolio(BaseModel):
    stocks: List[Stock] = Field(default_factory=list)
    total_value: float = 0.0
    total_gain: float = 0.0
    total_gain_percent: float = 0.0

    @property
    def symbols(self) -> List[str]:
        return [stock.symbol for stock in self.stocks]


class SectorAllocation(BaseModel):
    sector: str
    value: float
    weight_percent: float
    symbols: List[str] = Field(default_factory=list)


class PortfolioOverview(BaseModel):
    total_value: float
    total_gain: float
    total_gain_percent: float
    holdings_count: int
    allocations: List[SectorAllocation] = Field(default_factory=list)
    top_performers: List[Stock] = Field(default_factory=list)


class StockSearchResult(BaseModel):
    symbol: str
    name: str
    sector: Optional[str] = None


class AddStockRequest(BaseModel):
    symbol: str = Field(min_length=1, max_length=32)
    quantity: int


class PortfolioMutationResult(BaseModel):
    success: bool
    message: str
