"""Pydantic models for account, plan and organization endpoints."""

from pydantic import BaseModel, Field


class SimpleResponse(BaseModel):
    """Plain acknowledgement returned by mutating endpoints."""

    success: bool = False

    model_config = {"extra": "allow"}


class Profile(BaseModel):
    """Profile of the account linked to the API key."""

    member: bool = False
    credits: int = 0
    display_name: str | None = None
    created: str | None = None

    model_config = {"extra": "allow"}


class UsageLimits(BaseModel):
    scan_credits: int = 0
    query_credits: int = 0
    monitored_ips: int = 0


class ApiInfo(BaseModel):
    """API plan information for the key."""

    plan: str | None = None
    query_credits: int = 0
    scan_credits: int = 0
    monitored_ips: int | None = None
    unlocked: bool = False
    unlocked_left: int = 0
    https: bool = False
    telnet: bool = False
    usage_limits: UsageLimits | None = None

    model_config = {"extra": "allow"}


class OrgMember(BaseModel):
    username: str
    email: str | None = None


class Org(BaseModel):
    """Organization the account belongs to."""

    id: str
    name: str | None = None
    created: str | None = None
    admins: list[OrgMember] = Field(default_factory=list)
    members: list[OrgMember] = Field(default_factory=list)
    upgrade_type: str | None = None
    domains: list[str] = Field(default_factory=list)
    logo: str | bool | None = None

    model_config = {"extra": "allow"}
