"""Main client interface for the chat relay."""

import uuid
from typing import Any, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from ..config.settings import RelaySettings
from ..core.normalization import ConversationNormalizer
from ..errors import RequestShapeError
from ..models.conversation_types import ConversationRequest, Turn
from ..models.generation import ChatReply
from ..observability.logging import ProviderLogger
from ..providers.base import ProviderAdapter
from ..providers.registry import get_provider
from ..reliability.retry import RetryConfig, RetryManager

logger = ProviderLogger("relay")


class ChatRelay:
    """
    Stateless relay from a caller conversation to a provider reply.

    One instance may serve concurrent requests: the normalizer is pure and
    the adapter's HTTP client is safe for concurrent use.
    """

    def __init__(
        self,
        settings: RelaySettings,
        provider: Optional[ProviderAdapter] = None,
        normalizer: Optional[ConversationNormalizer] = None,
        retry_manager: Optional[RetryManager] = None,
    ):
        """
        Args:
            settings: Deployment settings (provider, key, policy, defaults)
            provider: Adapter to use instead of the one built from settings
            normalizer: Normalizer to use instead of the one built from settings
            retry_manager: Retry executor (tests inject one with a fake sleep)
        """
        self.settings = settings
        self.provider = provider or get_provider(settings)
        self.normalizer = normalizer or ConversationNormalizer(settings.policy, settings.preamble)
        self.retry_manager = retry_manager or RetryManager()
        self.retry_config = RetryConfig(max_attempts=settings.max_attempts)

    async def reply(
        self,
        request: Union[ConversationRequest, Sequence[Turn]],
        request_id: Optional[str] = None,
    ) -> ChatReply:
        """
        Normalize ``request`` and return the provider's reply.

        Raises:
            RequestShapeError: the conversation cannot be sent (no provider call)
            ConfigMissing: no API key is configured (no provider call)
            ProviderError: the provider call failed
        """
        request_id = request_id or str(uuid.uuid4())[:8]
        turns = request.turns() if isinstance(request, ConversationRequest) else list(request)

        contents = self.normalizer.normalize(turns)
        credentials = self.settings.require_credentials()

        logger.debug(
            "Relaying conversation",
            model=self.provider.model,
            request_id=request_id,
            policy=self.normalizer.policy.value,
            turns=len(turns),
            contents=len(contents),
        )

        text = await self.retry_manager.execute_with_retry(
            lambda: self.provider.generate(
                contents, self.settings.generation, credentials, request_id=request_id
            ),
            self.retry_config,
        )
        return ChatReply(reply=text)

    async def reply_to_payload(self, payload: Union[bytes, str, Mapping[str, Any]]) -> ChatReply:
        """Decode a raw inbound payload and relay it."""
        return await self.reply(parse_request(payload))

    async def ask(self, message: str, history: Optional[List[Turn]] = None) -> str:
        """Send one user message after an optional history and return the reply text."""
        request = ConversationRequest(messages=history or None, message=message)
        return (await self.reply(request)).reply

    async def aclose(self) -> None:
        await self.provider.aclose()


def parse_request(payload: Union[bytes, str, Mapping[str, Any]]) -> ConversationRequest:
    """
    Decode an inbound payload.

    Raises:
        RequestShapeError: malformed JSON, wrong shape, or no turns
    """
    try:
        if isinstance(payload, (bytes, str)):
            return ConversationRequest.model_validate_json(payload)
        return ConversationRequest.model_validate(payload)
    except ValidationError as e:
        raise RequestShapeError(f"invalid chat request: {e}")
