from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Endpoint(str, Enum):
    """NewsAPI query type, used as the last path segment."""

    TOP_HEADLINES = "top-headlines"


class Country(str, Enum):
    """Region filter passed as the ``country`` query parameter."""

    IN = "in"


class Article(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    url: str


class NewsApiResponse(BaseModel):
    """Top-level JSON envelope returned by NewsAPI.

    ``articles`` is required on ``ok`` envelopes. NewsAPI drops it from error
    envelopes, where it defaults to empty; callers must check ``status`` before
    trusting it.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    status: str
    articles: Tuple[Article, ...] = ()
    error_code: Optional[str] = Field(None, alias="code")
    message: Optional[str] = None
    total_results: Optional[int] = Field(None, alias="totalResults")

    @model_validator(mode="after")
    def _articles_required_when_ok(self):
        if self.ok and "articles" not in self.model_fields_set:
            raise ValueError("'articles' is required when status is 'ok'")
        return self

    @property
    def ok(self) -> bool:
        return self.status == "ok"
