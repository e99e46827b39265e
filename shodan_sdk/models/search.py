"""Pydantic models for search, token and saved-query responses."""

from typing import Any

from pydantic import BaseModel, Field

from shodan_sdk.models.host import Service


class FacetBucket(BaseModel):
    """One value of a facet summary with its hit count."""

    value: Any = None
    count: int = 0


class SearchResult(BaseModel):
    """Result of a host search or count.

    ``matches`` is empty for count requests.
    """

    matches: list[Service] = Field(default_factory=list)
    total: int = 0
    facets: dict[str, list[FacetBucket]] = Field(default_factory=dict)

    model_config = {"extra": "allow"}


class Tokens(BaseModel):
    """Breakdown of a search query into filters and free text."""

    attributes: dict[str, Any] = Field(default_factory=dict)
    errors: list[str] = Field(default_factory=list)
    string: str = ""
    filters: list[str] = Field(default_factory=list)

    model_config = {"extra": "allow"}


class SavedQuery(BaseModel):
    """A search query saved by a Shodan user."""

    title: str | None = None
    description: str | None = None
    query: str | None = None
    votes: int = 0
    timestamp: str | None = None
    tags: list[str] = Field(default_factory=list)

    model_config = {"extra": "allow"}


class SearchQueries(BaseModel):
    """A page of saved search queries."""

    matches: list[SavedQuery] = Field(default_factory=list)
    total: int = 0


class QueryTags(BaseModel):
    """Popular tags used on saved queries."""

    matches: list[FacetBucket] = Field(default_factory=list)
    total: int = 0
