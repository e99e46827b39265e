"""Public exceptions for the Shodan SDK."""


class ShodanError(Exception):
    """Base exception for all Shodan SDK errors."""


class ShodanConfigError(ShodanError):
    """Configuration error (missing API key, invalid config)."""


class ShodanValidationError(ShodanError):
    """Local precondition failed before any request was sent."""


class ShodanMissingParameterError(ShodanValidationError):
    """A required argument was empty."""


class ShodanRequestTooLargeError(ShodanValidationError):
    """A bulk list payload exceeds the length the API accepts."""


class ShodanTransportError(ShodanError):
    """The HTTP exchange could not be completed (DNS, connect, TLS, ...).

    The underlying cause is available as ``__cause__``.
    """


class ShodanTimeoutError(ShodanTransportError):
    """The exchange timed out or the call deadline passed."""


class ShodanCancelledError(ShodanTransportError):
    """The call was cancelled through its CallContext."""


class ShodanAPIError(ShodanError):
    """Non-2xx response from the Shodan API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ShodanDecodeError(ShodanError):
    """A successful response body could not be decoded into the expected shape."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
