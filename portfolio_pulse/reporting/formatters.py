"""Display helpers shared by the CLI views and API consumers."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from portfolio_pulse.core.types import NewsArticle

DEFAULT_CATEGORY = "BUSINESS"
NO_DESCRIPTION = "No description available."


def _group_indian(digits: str) -> str:
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(value: float) -> str:
    """Format a rupee amount with lakh/crore digit grouping, e.g. ``₹1,23,456.78``."""
    sign = "-" if value < 0 else ""
    whole, fraction = f"{abs(value):.2f}".split(".")
    return f"{sign}₹{_group_indian(whole)}.{fraction}"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def format_change(value: float) -> str:
    arrow = "↑" if value >= 0 else "↓"
    return f"{arrow} {abs(value):.2f}%"


def parse_pub_date(raw: str) -> Optional[datetime]:
    if not raw:
        return None
    try:
        return datetime.fromisoformat(raw.strip().replace("Z", "+00:00"))
    except ValueError:
        return None


def format_article_datetime(raw: str) -> str:
    """Render a publish timestamp as ``Mar 5, 2024 • 3:07 PM``; empty when unparseable."""
    parsed = parse_pub_date(raw)
    if parsed is None:
        return ""
    hour = parsed.hour % 12 or 12
    return f"{parsed:%b} {parsed.day}, {parsed.year} • {hour}:{parsed:%M} {parsed:%p}"


def format_article_date(raw: str) -> str:
    parsed = parse_pub_date(raw)
    if parsed is None:
        return ""
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def category_badge(categories: Sequence[str]) -> str:
    if categories and categories[0]:
        return categories[0].upper()
    return DEFAULT_CATEGORY


def article_description(article: NewsArticle) -> str:
    return article.description or NO_DESCRIPTION
