"""
Error mapping utilities for provider adapters.

Converts httpx exceptions, non-success responses and malformed bodies into
the relay's provider error types so every adapter classifies failures the
same way.
"""

import asyncio

import httpx

from ..errors import ProviderDecodeError, ProviderHTTPError, ProviderTransportError


class ErrorMapper:
    """Maps transport-level failures to standardized provider errors."""

    @staticmethod
    def map_transport_error(error: Exception, provider: str) -> ProviderTransportError:
        """
        Map an exception raised while sending the request.

        Args:
            error: The httpx exception, or asyncio.TimeoutError from the overall deadline
            provider: Provider name

        Returns:
            ProviderTransportError, flagged ``timed_out`` for deadline expiry
        """
        timed_out = isinstance(error, (httpx.TimeoutException, asyncio.TimeoutError))
        # Raw exception text stays on original_error; the message reaches callers
        if timed_out:
            message = f"{provider} request timed out"
        else:
            message = f"{provider} request failed before a response was received"
        mapped = ProviderTransportError(message, provider=provider, timed_out=timed_out)
        mapped.original_error = error
        return mapped

    @staticmethod
    def map_status_error(response: httpx.Response, provider: str) -> ProviderHTTPError:
        """Map a non-2xx response, keeping the full body for diagnosis."""
        return ProviderHTTPError(provider=provider, status=response.status_code, body=response.text)

    @staticmethod
    def map_decode_error(error: Exception, provider: str) -> ProviderDecodeError:
        """Map a 2xx body that is not JSON or not the expected shape."""
        mapped = ProviderDecodeError(
            f"{provider} response did not match the expected shape: {error}",
            provider=provider,
        )
        mapped.original_error = error
        return mapped
