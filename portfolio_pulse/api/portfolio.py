"""Mock portfolio routes."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query

from portfolio_pulse.api.deps import get_portfolio_service
from portfolio_pulse.api.errors import service_error_handler
from portfolio_pulse.modules.portfolio.schemas import (
    AddStockRequest,
    Portfolio,
    PortfolioMutationResult,
    PortfolioOverview,
    StockSearchResult,
)
from portfolio_pulse.modules.portfolio.service import PortfolioService

router = APIRouter(prefix="/api", tags=["portfolio"])


@router.get("/portfolio", response_model=Portfolio)
async def get_portfolio(
    service: PortfolioService = Depends(get_portfolio_service),
) -> Portfolio:
    return await service.fetch_portfolio()


@router.get("/portfolio/overview", response_model=PortfolioOverview)
async def get_portfolio_overview(
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioOverview:
    return await service.overview()


@router.post("/portfolio/stocks", response_model=PortfolioMutationResult)
@service_error_handler()
async def add_stock(
    payload: AddStockRequest,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioMutationResult:
    return await service.add_stock(symbol=payload.symbol, quantity=payload.quantity)


@router.delete("/portfolio/stocks/{symbol}", response_model=PortfolioMutationResult)
async def remove_stock(
    symbol: str,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioMutationResult:
    return await service.remove_stock(symbol=symbol)


@router.get("/stocks/search", response_model=List[StockSearchResult])
async def search_stocks(
    q: str = Query("", max_length=64),
    service: PortfolioService = Depends(get_portfolio_service),
) -> List[StockSearchResult]:
    return await service.search_stocks(q.strip())
