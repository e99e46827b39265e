"""Pydantic models for host and service banners."""

from typing import Any

from pydantic import BaseModel, Field


class Location(BaseModel):
    """Geolocation attached to a host or banner."""

    city: str | None = None
    region_code: str | None = None
    area_code: int | None = None
    postal_code: str | None = None
    country_code: str | None = None
    country_name: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    model_config = {"extra": "allow"}


class Service(BaseModel):
    """A single service banner collected by the crawlers.

    Only the fields common to every banner are typed; module-specific data
    (``http``, ``ssl``, ``ssh``, ...) is kept as extra fields.
    """

    ip: int | str | None = None
    ip_str: str | None = None
    port: int | None = None
    transport: str | None = None
    product: str | None = None
    version: str | None = None
    data: str | None = None
    hostnames: list[str] = Field(default_factory=list)
    domains: list[str] = Field(default_factory=list)
    org: str | None = None
    isp: str | None = None
    asn: str | None = None
    os: str | None = None
    timestamp: str | None = None
    hash: int | None = None
    cpe: list[str] | None = None
    tags: list[str] | None = None
    vulns: dict[str, Any] | None = None
    location: Location | None = None

    model_config = {"extra": "allow"}


class Host(BaseModel):
    """All services found on one IP address.

    ``ip`` is usually the integer form of the address, but some responses
    carry the dotted string; both are accepted as sent.
    """

    ip: int | str | None = None
    ip_str: str | None = None
    hostnames: list[str] = Field(default_factory=list)
    domains: list[str] = Field(default_factory=list)
    ports: list[int] = Field(default_factory=list)
    org: str | None = None
    isp: str | None = None
    asn: str | None = None
    os: str | None = None
    city: str | None = None
    country_code: str | None = None
    country_name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    last_update: str | None = None
    tags: list[str] = Field(default_factory=list)
    vulns: list[str] = Field(default_factory=list)
    data: list[Service] = Field(default_factory=list)

    model_config = {"extra": "allow"}
