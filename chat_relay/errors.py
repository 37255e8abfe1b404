"""
Error taxonomy for the relay.

Every failure is mapped to one of these types at the boundary where it is
detected. ``kind`` and ``status_code`` drive the caller-facing JSON payload.
"""

from typing import Optional


class RelayError(Exception):
    """Base class for all relay failures."""

    kind = "relay_error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigMissing(RelayError):
    """A required setting (usually the provider API key) is absent."""

    kind = "config_missing"
    status_code = 500


class RequestShapeError(RelayError):
    """Inbound payload undecodable, or the normalized conversation is invalid."""

    kind = "request_shape"
    status_code = 400


class ProviderError(RelayError):
    """
    Base exception for failures talking to the provider.

    Attributes:
        provider: Provider name
        is_retryable: Whether the retry policy may attempt the call again
        original_error: The wrapped exception, if any
    """

    kind = "provider_error"
    status_code = 502

    def __init__(self, message: str, provider: str):
        super().__init__(message)
        self.provider = provider
        self.is_retryable = False
        self.original_error: Optional[BaseException] = None


class ProviderTransportError(ProviderError):
    """Network failure or deadline exceeded before a response arrived."""

    kind = "provider_transport"

    def __init__(self, message: str, provider: str, timed_out: bool = False):
        super().__init__(message, provider)
        self.timed_out = timed_out
        self.is_retryable = True
        if timed_out:
            self.status_code = 504


class ProviderHTTPError(ProviderError):
    """Provider answered with a non-success status; the raw body is kept."""

    kind = "provider_http"

    def __init__(self, provider: str, status: int, body: str):
        super().__init__(f"{provider} returned HTTP {status}", provider)
        self.provider_status = status
        self.body = body


class ProviderDecodeError(ProviderError):
    """Provider answered 2xx but the body did not match the expected shape."""

    kind = "provider_decode"
