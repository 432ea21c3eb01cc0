from __future__ import annotations

from typing import Iterable

from portfolio_pulse.core.types import SentimentLabel

POSITIVE_TERMS = (
    "up",
    "rise",
    "high",
    "gain",
    "profit",
    "growth",
    "surge",
    "rally",
)

NEGATIVE_TERMS = (
    "down",
    "fall",
    "low",
    "loss",
    "drop",
    "decline",
    "plummet",
    "slump",
)


def count_terms(text: str, terms: Iterable[str]) -> int:
    # Each term counts at most once, matched as a substring of the lowered text.
    lowered = text.lower()
    return sum(1 for term in terms if term in lowered)


def classify_keywords(text: str) -> SentimentLabel:
    positive = count_terms(text, POSITIVE_TERMS)
    negative = count_terms(text, NEGATIVE_TERMS)
    if positive > negative:
        return "Positive"
    if negative > positive:
        return "Negative"
    return "Neutral"


def normalize_label(raw: str) -> SentimentLabel:
    lowered = (raw or "").strip().lower()
    if "pos" in lowered:
        return "Positive"
    if "neg" in lowered:
        return "Negative"
    return "Neutral"
