"""
Base Provider Adapter Interface

This module defines the abstract base class for provider adapters (the
"gateway" half of the relay). An adapter owns exactly one outbound call per
``generate`` invocation and classifies the result.

The adapter is responsible for:
- Translating normalized contents and generation config to the provider payload
- Making the HTTP call under a deadline
- Extracting the reply text from the provider response
- Mapping failures to the relay error types

Provider adapters should NOT contain:
- Conversation policy (see chat_relay.core.normalization)
- Retry decisions (see chat_relay.reliability)
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx

from ..config.constants import DEFAULT_TIMEOUT_SECONDS, FALLBACK_REPLY
from ..config.settings import ProviderCredentials
from ..errors import ConfigMissing, ProviderError
from ..models.conversation_types import NormalizedContent
from ..models.generation import GenerationConfig
from ..observability.logging import ProviderLogger
from .errors import ErrorMapper


class ProviderAdapter(ABC):
    """Abstract base class for provider adapters."""

    fallback_reply = FALLBACK_REPLY

    def __init__(
        self,
        model: str,
        base_url: Optional[str] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.model = model
        self.base_url = (base_url or self.default_base_url()).rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._client = client
        self.logger = ProviderLogger(self.get_provider_name())

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy initialization of the shared HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout_seconds))
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @abstractmethod
    def default_base_url(self) -> str:
        """Base URL used when none is configured."""

    @abstractmethod
    def endpoint_url(self) -> str:
        """Full URL of the generation endpoint."""

    @abstractmethod
    def build_payload(self, contents: NormalizedContent, config: GenerationConfig) -> Dict[str, Any]:
        """Provider JSON body for ``contents`` and ``config``."""

    @abstractmethod
    def auth(self, credentials: ProviderCredentials) -> Dict[str, Dict[str, str]]:
        """Return ``{"headers": ..., "params": ...}`` carrying the API key."""

    @abstractmethod
    def extract_reply(self, data: Any) -> Optional[str]:
        """
        Pull the reply text out of a decoded response body.

        Returns:
            The first candidate's first text part, or None when the provider
            returned no candidate text

        Raises:
            ProviderDecodeError: the body does not have the expected shape
        """

    async def generate(
        self,
        contents: NormalizedContent,
        config: GenerationConfig,
        credentials: Optional[ProviderCredentials],
        request_id: Optional[str] = None,
    ) -> str:
        """
        Send one generation request and return the reply text.

        Raises:
            ConfigMissing: no credentials were supplied
            ProviderTransportError: network failure or deadline exceeded
            ProviderHTTPError: non-success status from the provider
            ProviderDecodeError: success status with an unexpected body
        """
        if credentials is None:
            raise ConfigMissing(f"{self.get_provider_name()} credentials missing")

        payload = self.build_payload(contents, config)
        auth = self.auth(credentials)

        with self.logger.track_request("generate", self.model, request_id=request_id) as request_info:
            response = await self._post(payload, auth)

            if not response.is_success:
                error = ErrorMapper.map_status_error(response, self.get_provider_name())
                self.logger.warning(
                    "Provider returned error status",
                    model=self.model,
                    request_id=request_info['request_id'],
                    status=response.status_code,
                )
                raise error

            try:
                data = response.json()
            except ValueError as e:
                raise ErrorMapper.map_decode_error(e, self.get_provider_name())

            reply = self.extract_reply(data)
            if reply is None:
                self.logger.log_empty_candidates(data, self.model, request_info['request_id'])
                return self.fallback_reply
            return reply

    async def _post(self, payload: Dict[str, Any], auth: Dict[str, Dict[str, str]]) -> httpx.Response:
        # httpx timeouts apply per connect/read/write step; wait_for bounds the whole call
        try:
            return await asyncio.wait_for(
                self.client.post(
                    self.endpoint_url(),
                    json=payload,
                    headers=auth.get("headers"),
                    params=auth.get("params"),
                    timeout=self.timeout_seconds,
                ),
                self.timeout_seconds,
            )
        except (httpx.HTTPError, httpx.InvalidURL, asyncio.TimeoutError) as e:
            self.logger.warning(
                "Provider request did not complete",
                model=self.model,
                error_type=type(e).__name__,
                error_msg=str(e),
            )
            raise ErrorMapper.map_transport_error(e, self.get_provider_name())

    def get_provider_name(self) -> str:
        """
        Name of this provider.

        By default, returns the class name without 'Provider' suffix.
        """
        class_name = self.__class__.__name__
        if class_name.endswith("Provider"):
            return class_name[:-8].lower()
        return class_name.lower()


__all__ = ["ProviderAdapter", "ProviderError"]
