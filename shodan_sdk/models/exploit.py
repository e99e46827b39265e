"""Pydantic models for the exploits API."""

from pydantic import BaseModel, Field

from shodan_sdk.models.search import FacetBucket


class Exploit(BaseModel):
    """An exploit record from one of the indexed sources."""

    id: int | str
    source: str | None = None
    description: str | None = None
    author: str | int | None = None
    code: str | None = None
    date: str | None = None
    platform: str | None = None
    port: int | None = None
    type: str | None = None
    cve: list[str] = Field(default_factory=list)
    bid: list[int] = Field(default_factory=list)
    msb: list[str] = Field(default_factory=list)
    osvdb: list[int] = Field(default_factory=list)

    model_config = {"extra": "allow"}


class ExploitResult(BaseModel):
    """Result of an exploit search or count."""

    matches: list[Exploit] = Field(default_factory=list)
    total: int = 0
    facets: dict[str, list[FacetBucket]] = Field(default_factory=dict)

    model_config = {"extra": "allow"}
