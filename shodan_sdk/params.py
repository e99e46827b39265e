"""Query parameter builders for search-style endpoints.

Each params model renders itself to an ordered ``dict[str, str]`` with
``to_query()``. Unset options are left out, so an empty model renders to an
empty dict.
"""

from pydantic import BaseModel, Field, field_validator


def _quote_filter_value(value: str) -> str:
    """Quote a filter value that contains whitespace."""
    if any(ch.isspace() for ch in value) and not value.startswith('"'):
        return f'"{value}"'
    return value


def build_query(text: str | None, filters: dict[str, str | list[str]]) -> str:
    """Combine free text and ``name:value`` filters into one query string.

    List values are comma-joined, which the API reads as OR.

    >>> build_query("apache", {"country": "DE", "port": ["80", "443"]})
    'apache country:DE port:80,443'
    """
    parts: list[str] = []
    if text:
        parts.append(text.strip())
    for name, value in filters.items():
        if isinstance(value, list):
            value = ",".join(value)
        if value == "":
            continue
        parts.append(f"{name}:{_quote_filter_value(value)}")
    return " ".join(parts)


def _facets_value(facets: list[str]) -> str:
    return ",".join(f.strip() for f in facets if f.strip())


def _bool_value(flag: bool) -> str:
    return "true" if flag else "false"


class SearchParams(BaseModel):
    """Parameters for host search, count and token endpoints.

    Fields:
        query: Free text part of the search
        filters: Search filters, rendered as ``name:value`` terms
        facets: Facets to summarize, e.g. ``["country:10", "org"]``
        page: Result page (100 results per page)
        minify: Return only the basic host information
    """

    query: str | None = None
    filters: dict[str, str | list[str]] = Field(default_factory=dict)
    facets: list[str] = Field(default_factory=list)
    page: int | None = Field(default=None, ge=1)
    minify: bool | None = None

    model_config = {"frozen": True}

    def to_query(self) -> dict[str, str]:
        values: dict[str, str] = {}
        query = build_query(self.query, self.filters)
        if query:
            values["query"] = query
        facets = _facets_value(self.facets)
        if facets:
            values["facets"] = facets
        if self.page is not None:
            values["page"] = str(self.page)
        if self.minify is not None:
            values["minify"] = _bool_value(self.minify)
        return values


class HostParams(BaseModel):
    """Parameters for the host lookup endpoint.

    Fields:
        ip: Host IP address (goes into the path, not the query)
        history: Include all historical banners
        minify: Return only the list of ports and general host information
    """

    ip: str
    history: bool = False
    minify: bool = False

    model_config = {"frozen": True}

    @field_validator("ip")
    @classmethod
    def ip_stripped(cls, v: str) -> str:
        return v.strip()

    def to_query(self) -> dict[str, str]:
        values: dict[str, str] = {}
        if self.history:
            values["history"] = "true"
        if self.minify:
            values["minify"] = "true"
        return values


class ExploitParams(BaseModel):
    """Parameters for the exploits search and count endpoints.

    Fields:
        query: Free text part of the search
        filters: Exploit filters (author, platform, port, type, cve, ...)
        facets: Facets to summarize
        page: Result page
    """

    query: str | None = None
    filters: dict[str, str | list[str]] = Field(default_factory=dict)
    facets: list[str] = Field(default_factory=list)
    page: int | None = Field(default=None, ge=1)

    model_config = {"frozen": True}

    def to_query(self) -> dict[str, str]:
        values: dict[str, str] = {}
        query = build_query(self.query, self.filters)
        if query:
            values["query"] = query
        facets = _facets_value(self.facets)
        if facets:
            values["facets"] = facets
        if self.page is not None:
            values["page"] = str(self.page)
        return values
