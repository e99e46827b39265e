"""Shodan SDK for Python.

Async, typed bindings for the Shodan REST API and the Shodan exploits API.

Public API:
    ShodanClient - User-facing client
    CallContext - Cancellation and deadline for calls
    SearchParams, HostParams, ExploitParams - Query builders
    shodan_sdk.models - Response models
    shodan_sdk.exceptions - Error hierarchy

Internal (not for direct use):
    _internal.dispatch - Request dispatch layer
"""

from shodan_sdk._internal.dispatch import CallContext
from shodan_sdk._version import __version__
from shodan_sdk.client import ShodanClient, get_client
from shodan_sdk.params import ExploitParams, HostParams, SearchParams

__all__ = [
    "__version__",
    "CallContext",
    "ExploitParams",
    "HostParams",
    "SearchParams",
    "ShodanClient",
    "get_client",
]
