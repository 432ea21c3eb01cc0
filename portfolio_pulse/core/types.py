from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

SentimentLabel = Literal["Positive", "Neutral", "Negative"]


class NewsArticle(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    article_id: str
    title: str
    link: str = ""
    description: Optional[str] = None
    pub_date: str = Field(default="", alias="pubDate")
    image_url: Optional[str] = None
    source_name: str = ""
    category: List[str] = Field(default_factory=list)

    @field_validator("category", mode="before")
    @classmethod
    def _null_category(cls, value):
        # The provider sends null instead of an empty list for untagged articles.
        return value or []

    @field_validator("link", "pub_date", "source_name", mode="before")
    @classmethod
    def _null_text(cls, value):
        return value or ""


class NewsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status: str
    total_results: int = Field(default=0, alias="totalResults")
    results: List[NewsArticle] = Field(default_factory=list)
    next_page: Optional[str] = Field(default=None, alias="nextPage")
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @classmethod
    def failed(cls, error: str) -> "NewsResponse":
        return cls(status="error", total_results=0, results=[], error=error)


class GenerationRequest(BaseModel):
    prompt: str
    max_tokens: int = Field(ge=1)
    temperature: float = 0.3
    k: int = 0
    p: float = 1.0
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0
    stop_sequences: Optional[List[str]] = None
    return_likelihoods: Optional[str] = None


class SentimentResult(BaseModel):
    sentiment: SentimentLabel = "Neutral"
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    summary: Optional[str] = None
    error: Optional[str] = None
