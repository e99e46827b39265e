"""Request dispatcher for the Shodan API."""

from collections.abc import Mapping
from typing import TypeVar

import httpx
from pydantic import ValidationError

from shodan_sdk._internal import routes
from shodan_sdk._internal.dispatch.context import CallContext
from shodan_sdk._internal.dispatch.models import Decoder, EndpointTarget, ErrorEnvelope, Origin
from shodan_sdk._internal.dispatch.redaction import AUTH_PARAM, redact_text, redact_url
from shodan_sdk.exceptions import (
    ShodanAPIError,
    ShodanConfigError,
    ShodanDecodeError,
    ShodanTimeoutError,
    ShodanTransportError,
)

T = TypeVar("T")


class Dispatcher:
    """Turns an EndpointTarget into one authenticated HTTP exchange.

    The dispatcher holds only immutable state: the API key, the two origin
    base URLs and a reusable httpx.AsyncClient. Concurrent calls need no
    locking. There are no retries; each call sends exactly one request or
    fails before sending any.

    Failures are raised, never logged or swallowed:
        ShodanTransportError: connect/DNS/TLS failure, timeout, cancellation
        ShodanAPIError: non-2xx status
        ShodanDecodeError: body fails content decoding or does not match the
            requested shape
    """

    def __init__(
        self,
        *,
        api_key: str,
        http_client: httpx.AsyncClient,
        api_url: str = routes.API_ROOT,
        exploits_url: str = routes.API_EXPLOITS,
        debug: bool = False,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            api_key: The Shodan API key, sent as the ``key`` query parameter.
            http_client: Shared async HTTP client (connection pool).
            api_url: Base URL of the main API.
            exploits_url: Base URL of the exploits API.
            debug: Enable debug logging to stderr.
        """
        if not api_key:
            raise ShodanConfigError("Missing API key")
        self._api_key = api_key
        self._http = http_client
        self._bases: Mapping[Origin, str] = {
            Origin.MAIN: api_url.rstrip("/"),
            Origin.EXPLOITS: exploits_url.rstrip("/"),
        }
        self._debug = debug

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            import sys

            print(f"[shodan-sdk] {redact_text(message, self._api_key)}", file=sys.stderr)

    def base_url(self, origin: Origin) -> str:
        """Resolve an origin to its base URL."""
        return self._bases[origin]

    def build_request(self, target: EndpointTarget) -> httpx.Request:
        """Build the outgoing request, with the API key in the query string.

        A ``key`` parameter already supplied by upstream query logic is kept
        as is; the client key is only added when none is present.
        """
        params = list(target.params.items())
        if AUTH_PARAM not in target.params:
            params.append((AUTH_PARAM, self._api_key))

        return self._http.build_request(
            target.method,
            self.base_url(target.origin) + target.path,
            params=params,
            content=target.content,
            headers=dict(target.headers) or None,
        )

    async def dispatch(
        self,
        target: EndpointTarget,
        decoder: Decoder[T],
        context: CallContext | None = None,
    ) -> T:
        """Send one request and decode its response.

        Args:
            target: The exchange to perform.
            decoder: Expected shape of the JSON response body.
            context: Optional cancellation/deadline for this call.

        Returns:
            The decoded response body.
        """
        request = self.build_request(target)
        response = await self._send(request, context)
        return self._decode(response, decoder)

    async def _send(self, request: httpx.Request, context: CallContext | None) -> httpx.Response:
        """Perform the exchange, mapping httpx request errors.

        A body that fails content decoding (broken gzip, bad charset) is a
        decode error; every other request error is a transport error.
        """
        self._log_debug(f"{request.method} {redact_url(request.url)}")
        try:
            if context is None:
                response = await self._http.send(request)
            else:
                response = await context.run(self._http.send(request))
        except httpx.TimeoutException as e:
            raise ShodanTimeoutError(self._describe(request, e)) from e
        except httpx.DecodingError as e:
            raise ShodanDecodeError(self._describe(request, e)) from e
        except httpx.RequestError as e:
            raise ShodanTransportError(self._describe(request, e)) from e

        self._log_debug(f"{request.method} {request.url.path} -> {response.status_code}")
        return response

    def _describe(self, request: httpx.Request, exc: Exception) -> str:
        detail = redact_text(str(exc), self._api_key) or exc.__class__.__name__
        return f"{request.method} {request.url.path} failed: {detail}"

    def _decode(self, response: httpx.Response, decoder: Decoder[T]) -> T:
        """Decode a response body or raise the matching classified error."""
        if not response.is_success:
            raise self._api_error(response)

        try:
            return decoder.decode(response.content)
        except ValidationError as e:
            raise ShodanDecodeError(
                f"Could not decode response from {response.request.url.path}: "
                f"{e.error_count()} error(s), first: {e.errors()[0]['msg']}",
                status_code=response.status_code,
            ) from e

    def _api_error(self, response: httpx.Response) -> ShodanAPIError:
        """Build an API error from the error envelope, or the raw body."""
        try:
            message = ErrorEnvelope.model_validate_json(response.content).error
        except ValidationError:
            message = response.text
        return ShodanAPIError(redact_text(message, self._api_key), status_code=response.status_code)
