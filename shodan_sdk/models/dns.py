"""Pydantic models for DNS endpoints."""

from pydantic import BaseModel, Field


class DnsRecord(BaseModel):
    subdomain: str = ""
    type: str | None = None
    value: str | None = None
    last_seen: str | None = None

    model_config = {"extra": "allow"}


class Domain(BaseModel):
    """Subdomains and DNS records known for a domain."""

    domain: str
    tags: list[str] = Field(default_factory=list)
    subdomains: list[str] = Field(default_factory=list)
    data: list[DnsRecord] = Field(default_factory=list)
    more: bool = False

    model_config = {"extra": "allow"}
