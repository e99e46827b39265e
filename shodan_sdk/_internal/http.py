"""Shared HTTP client configuration."""

import httpx

from shodan_sdk._version import __version__

DEFAULT_TIMEOUT = 30.0


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    The client owns the connection pool shared by every call made through one
    ShodanClient. Base URLs are not set here because requests go to two
    different origins.

    Args:
        timeout: Request timeout in seconds.
        transport: Optional transport override (used by tests).

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        transport=transport,
        headers={
            "User-Agent": f"shodan-sdk/{__version__}",
            "Accept": "application/json",
        },
    )
