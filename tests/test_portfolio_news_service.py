import unittest
from typing import Dict, List, Sequence

from portfolio_pulse.core.types import NewsArticle, NewsResponse, SentimentResult
from portfolio_pulse.modules.portfolio_news.service import PortfolioNewsService
from tests.helpers import article_payload, fast_config


def _response(symbol: str, count: int) -> NewsResponse:
    articles = [
        NewsArticle.model_validate(article_payload(f"{symbol}-{index}", f"{symbol} headline {index}"))
        for index in range(count)
    ]
    return NewsResponse(status="success", total_results=count, results=articles)


class _FakeNewsService:
    def __init__(self, responses: Dict[str, NewsResponse], error: Exception | None = None) -> None:
        self.responses = responses
        self.error = error
        self.calls: List[List[str]] = []

    async def fetch_news_for_symbols(self, symbols: Sequence[str]) -> Dict[str, NewsResponse]:
        self.calls.append(list(symbols))
        if self.error is not None:
            raise self.error
        return {symbol: self.responses[symbol] for symbol in symbols}


class _FakeSentimentService:
    def __init__(self, failing: Sequence[str] = ()) -> None:
        self.failing = set(failing)
        self.headlines: List[List[str]] = []

    async def analyze(self, headlines: List[str]) -> SentimentResult:
        self.headlines.append(list(headlines))
        if any(headline.split()[0] in self.failing for headline in headlines):
            raise RuntimeError("model offline")
        return SentimentResult(sentiment="Positive", confidence=0.8, summary="Upbeat coverage.")


class PortfolioNewsServiceTest(unittest.IsolatedAsyncioTestCase):
    def _service(self, news, sentiment=None) -> PortfolioNewsService:
        return PortfolioNewsService(
            config=fast_config(),
            news_service=news,
            sentiment_service=sentiment or _FakeSentimentService(),
        )

    async def test_symbols_without_news_get_no_tab(self):
        news = _FakeNewsService(
            {
                "TCS": NewsResponse.failed("Error: 500"),
                "INFY": _response("INFY", 2),
                "ITC": _response("ITC", 0),
            }
        )
        view = await self._service(news).load(["TCS", "INFY", "ITC"])

        self.assertIsNone(view.error)
        self.assertEqual(view.requested_symbols, ["TCS", "INFY", "ITC"])
        self.assertEqual([tab.symbol for tab in view.tabs], ["INFY"])
        self.assertEqual(view.active_tab, "INFY")
        self.assertIsNone(view.tab("TCS"))

    async def test_active_tab_falls_back_to_first_requested_symbol(self):
        news = _FakeNewsService({"TCS": _response("TCS", 0), "INFY": NewsResponse.failed("boom")})
        view = await self._service(news).load(["TCS", "INFY"])

        self.assertEqual(view.tabs, [])
        self.assertEqual(view.active_tab, "TCS")
        self.assertIsNone(view.error)

    async def test_tab_shows_capped_articles_but_full_count(self):
        sentiment = _FakeSentimentService()
        news = _FakeNewsService({"SBIN": _response("SBIN", 9)})
        view = await self._service(news, sentiment).load(["SBIN"])

        tab = view.tab("SBIN")
        self.assertEqual(tab.article_count, 9)
        self.assertEqual(len(tab.articles), 6)
        self.assertEqual(tab.sentiment.sentiment, "Positive")
        # Sentiment sees every headline, not only the displayed ones.
        self.assertEqual(len(sentiment.headlines[0]), 9)

    async def test_sentiment_failure_is_contained_to_its_tab(self):
        news = _FakeNewsService({"TCS": _response("TCS", 1), "INFY": _response("INFY", 1)})
        view = await self._service(news, _FakeSentimentService(failing={"TCS"})).load(["TCS", "INFY"])

        failed = view.tab("TCS").sentiment
        self.assertEqual(failed.sentiment, "Neutral")
        self.assertEqual(failed.confidence, 0)
        self.assertEqual(failed.summary, "Sentiment analysis is currently unavailable.")
        self.assertEqual(failed.error, "model offline")
        self.assertEqual(view.tab("INFY").sentiment.sentiment, "Positive")

    async def test_empty_and_duplicate_symbols(self):
        news = _FakeNewsService({"TCS": _response("TCS", 1)})
        service = self._service(news)

        empty = await service.load([])
        self.assertEqual(empty.tabs, [])
        self.assertIsNone(empty.active_tab)
        self.assertEqual(news.calls, [])

        view = await service.load(["TCS", "", "TCS"])
        self.assertEqual(news.calls, [["TCS"]])
        self.assertEqual(len(view.tabs), 1)

    async def test_news_failure_sets_view_error(self):
        news = _FakeNewsService({}, error=RuntimeError("network down"))
        view = await self._service(news).load(["TCS"])

        self.assertEqual(view.error, "Failed to load news. Please try again later.")
        self.assertEqual(view.tabs, [])


if __name__ == "__main__":
    unittest.main()
