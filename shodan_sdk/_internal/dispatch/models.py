"""Request and response shapes used by the dispatcher.

An EndpointTarget describes exactly one HTTP exchange. A decoder (RecordOf,
SequenceOf, MappingOf or ScalarOf) states what the caller expects the JSON
body to look like; the dispatcher never infers it from the response.
"""

import dataclasses
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Any, Generic, Literal, TypeVar
from urllib.parse import urlencode

from pydantic import BaseModel, TypeAdapter

from shodan_sdk.exceptions import ShodanValidationError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

# =============================================================================
# Constants
# =============================================================================

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]
HTTP_METHODS: frozenset[str] = frozenset({"GET", "POST", "PUT", "DELETE"})

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"

SCALAR_TYPES: tuple[type, ...] = (str, int, float, bool)

# =============================================================================
# Endpoint Target
# =============================================================================


class Origin(str, Enum):
    """API origin a request is sent to."""

    MAIN = "main"
    EXPLOITS = "exploits"


@dataclass(frozen=True)
class EndpointTarget:
    """Fully resolved description of one HTTP exchange.

    Fields:
        method: HTTP verb (GET, POST, PUT, DELETE)
        path: Resolved path, no remaining template slots
        origin: Which API origin to send to (default: main API)
        params: Ordered query parameters, excluding the API key
        content: Raw request body, sent verbatim
        headers: Extra request headers, sent verbatim
    """

    method: HttpMethod
    path: str
    origin: Origin = Origin.MAIN
    params: Mapping[str, str] = field(default_factory=dict)
    content: bytes | None = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.method not in HTTP_METHODS:
            raise ShodanValidationError(f"unsupported HTTP method: {self.method}")
        if not self.path.startswith("/"):
            raise ShodanValidationError(f"path must start with '/': {self.path}")
        if "{}" in self.path:
            raise ShodanValidationError(f"path has unresolved slots: {self.path}")

    def with_form(self, fields: Mapping[str, str]) -> "EndpointTarget":
        """Return a copy carrying a URL-encoded form body."""
        return dataclasses.replace(
            self,
            content=urlencode(list(fields.items())).encode("ascii"),
            headers={**self.headers, "Content-Type": FORM_CONTENT_TYPE},
        )

    def with_json(self, body: BaseModel | Mapping[str, Any]) -> "EndpointTarget":
        """Return a copy carrying a JSON body."""
        if isinstance(body, BaseModel):
            content = body.model_dump_json(exclude_none=True).encode("utf-8")
        else:
            content = json.dumps(body).encode("utf-8")
        return dataclasses.replace(
            self,
            content=content,
            headers={**self.headers, "Content-Type": JSON_CONTENT_TYPE},
        )


# =============================================================================
# Decode Destinations
# =============================================================================


@lru_cache(maxsize=None)
def _adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


class Decoder(Generic[T]):
    """Base class for the closed set of decode destinations."""

    def _type(self) -> Any:
        raise NotImplementedError

    def decode(self, content: bytes) -> T:
        """Parse and validate a raw JSON body.

        Raises:
            pydantic.ValidationError: malformed JSON or shape mismatch.
        """
        return _adapter(self._type()).validate_json(content)


@dataclass(frozen=True)
class RecordOf(Decoder[M]):
    """Decode a JSON object into a pydantic model."""

    model: type[M]

    def _type(self) -> Any:
        return self.model


@dataclass(frozen=True)
class SequenceOf(Decoder[list[T]]):
    """Decode a JSON array, validating each item."""

    item: Any

    def _type(self) -> Any:
        return list[self.item]


@dataclass(frozen=True)
class MappingOf(Decoder[dict[str, T]]):
    """Decode a JSON object into a dict with string keys."""

    value: Any

    def _type(self) -> Any:
        return dict[str, self.value]


@dataclass(frozen=True)
class ScalarOf(Decoder[T]):
    """Decode a bare JSON string, number or boolean."""

    kind: type[T]

    def __post_init__(self) -> None:
        if self.kind not in SCALAR_TYPES:
            raise TypeError(f"ScalarOf expects one of str, int, float, bool; got {self.kind!r}")

    def _type(self) -> Any:
        return self.kind


# =============================================================================
# Error Envelope
# =============================================================================


class ErrorEnvelope(BaseModel):
    """Error body returned by the API on non-2xx responses."""

    error: str

    model_config = {"extra": "allow"}
