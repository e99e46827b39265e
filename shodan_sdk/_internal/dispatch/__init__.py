"""Request dispatch layer for the Shodan SDK.

Every ShodanClient method builds an EndpointTarget and hands it to the
Dispatcher together with the decoder for the expected response shape.
"""

from shodan_sdk._internal.dispatch.client import Dispatcher
from shodan_sdk._internal.dispatch.context import CallContext
from shodan_sdk._internal.dispatch.models import (
    Decoder,
    EndpointTarget,
    ErrorEnvelope,
    MappingOf,
    Origin,
    RecordOf,
    ScalarOf,
    SequenceOf,
)

__all__ = [
    "Dispatcher",
    "CallContext",
    "EndpointTarget",
    "Origin",
    "Decoder",
    "RecordOf",
    "SequenceOf",
    "MappingOf",
    "ScalarOf",
    "ErrorEnvelope",
]
