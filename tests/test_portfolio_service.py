import random
import unittest

from portfolio_pulse.core.errors import ValidationError
from portfolio_pulse.modules.portfolio.catalog import STOCK_CATALOG
from portfolio_pulse.modules.portfolio.schemas import Stock
from portfolio_pulse.modules.portfolio.service import (
    PortfolioService,
    build_portfolio,
    sector_allocation,
    top_performers,
)
from tests.helpers import fast_config


class PortfolioServiceTest(unittest.IsolatedAsyncioTestCase):
    def _service(self, seed: int = 7) -> PortfolioService:
        return PortfolioService(config=fast_config(), rng=random.Random(seed))

    async def test_generated_holdings_respect_catalog_bounds(self):
        catalog = {item.symbol: item for item in STOCK_CATALOG}
        for seed in range(20):
            portfolio = await self._service(seed).fetch_portfolio()

            self.assertGreaterEqual(len(portfolio.stocks), 3)
            self.assertLessEqual(len(portfolio.stocks), 6)
            self.assertEqual(len(set(portfolio.symbols)), len(portfolio.symbols))
            for stock in portfolio.stocks:
                item = catalog[stock.symbol]
                self.assertGreaterEqual(stock.quantity, 5)
                self.assertLessEqual(stock.quantity, 54)
                self.assertEqual(stock.current_price, item.current_price)
                self.assertGreaterEqual(stock.avg_price, item.current_price * 0.9 - 1e-9)
                self.assertLessEqual(stock.avg_price, item.current_price * 1.1 + 1e-9)

    async def test_totals_are_derived_from_holdings(self):
        for seed in range(10):
            portfolio = await self._service(seed).fetch_portfolio()

            value = sum(stock.quantity * stock.current_price for stock in portfolio.stocks)
            invested = sum(stock.quantity * stock.avg_price for stock in portfolio.stocks)
            self.assertAlmostEqual(portfolio.total_value, value)
            self.assertAlmostEqual(portfolio.total_gain, value - invested)
            self.assertAlmostEqual(portfolio.total_gain_percent, (value - invested) / invested * 100)
            for stock in portfolio.stocks:
                self.assertAlmostEqual(stock.current_value, stock.quantity * stock.current_price)
                self.assertAlmostEqual(stock.gain, (stock.current_price - stock.avg_price) * stock.quantity)

    async def test_same_seed_reproduces_portfolio(self):
        first = await self._service(42).fetch_portfolio()
        second = await self._service(42).fetch_portfolio()

        self.assertEqual(first.model_dump(), second.model_dump())

    async def test_overview_weights_cover_whole_portfolio(self):
        overview = await self._service(3).overview()

        self.assertGreaterEqual(overview.holdings_count, 3)
        self.assertAlmostEqual(sum(item.weight_percent for item in overview.allocations), 100.0)
        values = [item.value for item in overview.allocations]
        self.assertEqual(values, sorted(values, reverse=True))

    async def test_top_performers_rank_by_return_on_cost(self):
        holdings = [
            Stock(
                symbol=symbol,
                name=symbol,
                quantity=10,
                avg_price=avg_price,
                current_price=100.0,
                change=0.0,
                change_percent=0.0,
            )
            for symbol, avg_price in (("LAG", 120.0), ("MID", 95.0), ("TOP", 80.0), ("FLAT", 100.0), ("UP", 90.0))
        ]
        ranked = top_performers(build_portfolio(holdings))

        self.assertEqual([stock.symbol for stock in ranked], ["TOP", "UP", "MID"])
        self.assertAlmostEqual(ranked[0].gain_percent, 25.0)
        self.assertEqual(len(top_performers(build_portfolio(holdings[:2]))), 2)

    async def test_overview_lists_at_most_three_top_performers(self):
        for seed in range(10):
            overview = await self._service(seed).overview()

            self.assertEqual(len(overview.top_performers), min(3, overview.holdings_count))
            returns = [stock.gain_percent for stock in overview.top_performers]
            self.assertEqual(returns, sorted(returns, reverse=True))

    async def test_sector_allocation_groups_symbols(self):
        portfolio = await self._service(11).fetch_portfolio()
        allocations = sector_allocation(portfolio)

        grouped = sorted(symbol for item in allocations for symbol in item.symbols)
        self.assertEqual(grouped, sorted(portfolio.symbols))

    async def test_search_matches_symbol_name_and_sector(self):
        service = self._service()

        self.assertEqual(await service.search_stocks(""), [])
        banks = {item.symbol for item in await service.search_stocks("bank")}
        self.assertEqual(banks, {"HDFCBANK", "ICICIBANK", "SBIN", "AUBANK"})
        tata = {item.symbol for item in await service.search_stocks("TATA")}
        self.assertEqual(tata, {"TCS", "TATAMOTORS", "TATAPOWER"})
        self.assertEqual(await service.search_stocks("nothing-like-this"), [])

    async def test_add_stock_messages(self):
        service = self._service()

        added = await service.add_stock("tcs", 5)
        self.assertTrue(added.success)
        self.assertEqual(added.message, "5 shares of Tata Consultancy Services added to your portfolio")

        missing = await service.add_stock("NOPE", 5)
        self.assertFalse(missing.success)
        self.assertEqual(missing.message, "Stock not found")

    async def test_add_stock_rejects_invalid_quantity(self):
        service = self._service()
        for quantity in (0, -3, True, 2.5):
            with self.assertRaises(ValidationError):
                await service.add_stock("TCS", quantity)

    async def test_remove_stock_messages(self):
        service = self._service()

        removed = await service.remove_stock("INFY")
        self.assertTrue(removed.success)
        self.assertEqual(removed.message, "Infosys removed from your portfolio")

        missing = await service.remove_stock("NOPE")
        self.assertFalse(missing.success)
        self.assertEqual(missing.message, "Stock not found")


if __name__ == "__main__":
    unittest.main()
