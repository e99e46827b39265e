"""Pydantic models for network alerts."""

from typing import Any

from pydantic import BaseModel, Field


class AlertFilters(BaseModel):
    """Networks monitored by an alert."""

    ip: list[str] = Field(default_factory=list)

    model_config = {"extra": "allow"}


class Alert(BaseModel):
    """Request body for creating a network alert.

    Required fields:
        name: Name to describe the alert
        filters: IPs/netblocks to monitor

    Optional fields:
        expires: Number of seconds the alert should be active
    """

    name: str = Field(min_length=1)
    filters: AlertFilters
    expires: int | None = Field(default=None, ge=0)


class AlertDetails(BaseModel):
    """A network alert as stored by the API."""

    id: str
    name: str | None = None
    created: str | None = None
    expiration: str | None = None
    expires: int | None = None
    size: int | None = None
    filters: AlertFilters | None = None
    triggers: dict[str, Any] = Field(default_factory=dict)
    has_triggers: bool = False

    model_config = {"extra": "allow"}


class Trigger(BaseModel):
    """A trigger that can be enabled on network alerts."""

    name: str
    description: str | None = None
    rule: str | None = None

    model_config = {"extra": "allow"}
