import unittest

from portfolio_pulse.core.types import NewsArticle
from portfolio_pulse.reporting.formatters import (
    article_description,
    category_badge,
    format_article_date,
    format_article_datetime,
    format_change,
    format_inr,
    format_percent,
)


class FormattersTest(unittest.TestCase):
    def test_format_inr_uses_indian_grouping(self):
        self.assertEqual(format_inr(123456.78), "₹1,23,456.78")
        self.assertEqual(format_inr(12345678.9), "₹1,23,45,678.90")
        self.assertEqual(format_inr(999), "₹999.00")
        self.assertEqual(format_inr(1000), "₹1,000.00")
        self.assertEqual(format_inr(0), "₹0.00")
        self.assertEqual(format_inr(-4520.5), "-₹4,520.50")

    def test_percent_and_change(self):
        self.assertEqual(format_percent(12.3456), "12.35%")
        self.assertEqual(format_change(1.06), "↑ 1.06%")
        self.assertEqual(format_change(-0.92), "↓ 0.92%")
        self.assertEqual(format_change(0), "↑ 0.00%")

    def test_article_timestamps(self):
        self.assertEqual(format_article_datetime("2024-03-05 15:07:00"), "Mar 5, 2024 • 3:07 PM")
        self.assertEqual(format_article_datetime("2024-12-01 00:30:00"), "Dec 1, 2024 • 12:30 AM")
        self.assertEqual(format_article_date("2024-03-05 15:07:00"), "Mar 5, 2024")
        self.assertEqual(format_article_datetime("yesterday"), "")
        self.assertEqual(format_article_date(""), "")

    def test_category_badge_and_description(self):
        self.assertEqual(category_badge(["top", "business"]), "TOP")
        self.assertEqual(category_badge([]), "BUSINESS")

        bare = NewsArticle(article_id="a1", title="Untitled", description=None)
        self.assertEqual(article_description(bare), "No description available.")
        described = NewsArticle(article_id="a2", title="Titled", description="Quarterly update")
        self.assertEqual(article_description(described), "Quarterly update")


if __name__ == "__main__":
    unittest.main()
