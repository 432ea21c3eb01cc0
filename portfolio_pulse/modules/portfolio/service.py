from __future__ import annotations

import asyncio
import logging
import random
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from portfolio_pulse.config import AppConfig
from portfolio_pulse.core.errors import ValidationError
from portfolio_pulse.modules.portfolio.catalog import STOCK_CATALOG
from portfolio_pulse.modules.portfolio.schemas import (
    CatalogStock,
    Portfolio,
    PortfolioMutationResult,
    PortfolioOverview,
    SectorAllocation,
    Stock,
    StockSearchResult,
)

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Stock not found"


def build_portfolio(stocks: Sequence[Stock]) -> Portfolio:
    """Derive per-stock and aggregate gain figures from raw holdings."""
    derived: List[Stock] = []
    for stock in stocks:
        investment = stock.quantity * stock.avg_price
        current_value = stock.quantity * stock.current_price
        gain = (stock.current_price - stock.avg_price) * stock.quantity
        gain_percent = ((stock.current_price - stock.avg_price) / stock.avg_price) * 100 if stock.avg_price else 0.0
        derived.append(
            stock.model_copy(
                update={
                    "investment": investment,
                    "current_value": current_value,
                    "gain": gain,
                    "gain_percent": gain_percent,
                }
            )
        )

    total_value = sum(stock.quantity * stock.current_price for stock in derived)
    total_investment = sum(stock.quantity * stock.avg_price for stock in derived)
    total_gain = total_value - total_investment
    total_gain_percent = (total_gain / total_investment) * 100 if total_investment else 0.0
    return Portfolio(
        stocks=derived,
        total_value=total_value,
        total_gain=total_gain,
        total_gain_percent=total_gain_percent,
    )


def sector_allocation(portfolio: Portfolio) -> List[SectorAllocation]:
    values: Dict[str, float] = defaultdict(float)
    members: Dict[str, List[str]] = defaultdict(list)
    for stock in portfolio.stocks:
        sector = stock.sector or "Other"
        values[sector] += stock.quantity * stock.current_price
        members[sector].append(stock.symbol)

    total = portfolio.total_value
    allocations = [
        SectorAllocation(
            sector=sector,
            value=value,
            weight_percent=(value / total) * 100 if total else 0.0,
            symbols=members[sector],
        )
        for sector, value in values.items()
    ]
    allocations.sort(key=lambda item: item.value, reverse=True)
    return allocations



def top_performers(portfolio: Portfolio, limit: int = 3) -> List[Stock]:
    """Holdings ranked by return on average cost, best first."""
    ranked = sorted(portfolio.stocks, key=lambda stock: stock.gain_percent, reverse=True)
    return ranked[:limit]

class PortfolioService:
    """In-memory mock of a brokerage portfolio backed by a fixed catalog.

    Every ``fetch_portfolio`` call draws a new random set of holdings; add and
    remove only validate the symbol and answer with a canned message, so they
    have no effect on later fetches.
    """

    def __init__(
        self,
        config: AppConfig,
        rng: Optional[random.Random] = None,
        catalog: Optional[Sequence[CatalogStock]] = None,
    ) -> None:
        self.config = config
        self.rng = rng or random.Random(config.portfolio.seed)
        self.catalog: List[CatalogStock] = list(catalog if catalog is not None else STOCK_CATALOG)
        self._by_symbol: Dict[str, CatalogStock] = {item.symbol: item for item in self.catalog}

    async def fetch_portfolio(self) -> Portfolio:
        await asyncio.sleep(self.config.portfolio.fetch_delay_seconds)
        return self.generate_portfolio()

    def generate_portfolio(self) -> Portfolio:
        settings = self.config.portfolio
        upper = min(settings.max_stocks, len(self.catalog))
        lower = min(settings.min_stocks, upper)
        count = self.rng.randint(lower, upper)
        selected = self.rng.sample(self.catalog, count)
        holdings = [
            Stock(
                symbol=item.symbol,
                name=item.name,
                quantity=self.rng.randrange(5, 55),
                avg_price=item.current_price * (0.9 + self.rng.random() * 0.2),
                current_price=item.current_price,
                change=item.change,
                change_percent=item.change_percent,
                sector=item.sector,
            )
            for item in selected
        ]
        return build_portfolio(holdings)

    async def overview(self) -> PortfolioOverview:
        portfolio = await self.fetch_portfolio()
        return PortfolioOverview(
            total_value=portfolio.total_value,
            total_gain=portfolio.total_gain,
            total_gain_percent=portfolio.total_gain_percent,
            holdings_count=len(portfolio.stocks),
            allocations=sector_allocation(portfolio),
            top_performers=top_performers(portfolio),
        )

    async def add_stock(self, symbol: str, quantity: int) -> PortfolioMutationResult:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError("Please enter a valid quantity")
        await asyncio.sleep(self.config.portfolio.mutation_delay_seconds)
        stock = self._lookup(symbol)
        if stock is None:
            return PortfolioMutationResult(success=False, message=NOT_FOUND_MESSAGE)
        logger.info("mock add: %s x%d", stock.symbol, quantity)
        return PortfolioMutationResult(
            success=True,
            message=f"{quantity} shares of {stock.name} added to your portfolio",
        )

    async def remove_stock(self, symbol: str) -> PortfolioMutationResult:
        await asyncio.sleep(self.config.portfolio.mutation_delay_seconds)
        stock = self._lookup(symbol)
        if stock is None:
            return PortfolioMutationResult(success=False, message=NOT_FOUND_MESSAGE)
        logger.info("mock remove: %s", stock.symbol)
        return PortfolioMutationResult(success=True, message=f"{stock.name} removed from your portfolio")

    async def search_stocks(self, query: str) -> List[StockSearchResult]:
        await asyncio.sleep(self.config.portfolio.search_delay_seconds)
        if not query:
            return []
        needle = query.lower()
        return [
            StockSearchResult(symbol=item.symbol, name=item.name, sector=item.sector)
            for item in self.catalog
            if needle in item.symbol.lower()
            or needle in item.name.lower()
            or (item.sector is not None and needle in item.sector.lower())
        ]

    def _lookup(self, symbol: str) -> Optional[CatalogStock]:
        return self._by_symbol.get((symbol or "").strip().upper())
