"""Pydantic models for on-demand scans."""

from pydantic import BaseModel, Field


class Scan(BaseModel):
    """A submitted scan or its current status."""

    id: str
    count: int | None = None
    credits_left: int | None = None
    status: str | None = None
    created: str | None = None

    model_config = {"extra": "allow"}


class ScanList(BaseModel):
    """A page of the account's scans."""

    matches: list[Scan] = Field(default_factory=list)
    total: int = 0
