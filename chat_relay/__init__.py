"""
Chat Relay - a stateless relay from a chat UI to an LLM generation endpoint.

The relay accepts a caller's conversation, normalizes speaker roles under a
configurable policy, attaches fixed generation parameters, makes a single
provider call and returns one reply string.

Supported providers:
- Google Gemini (generateContent)
- OpenAI-style chat completions

The HTTP surface lives in ``chat_relay.http`` (FastAPI).
"""

__version__ = "0.1.0"

from .api.client import ChatRelay, parse_request
from .config.settings import ProviderCredentials, RelaySettings
from .core.normalization import ConversationNormalizer, NormalizePolicy, SystemPreamble, normalize
from .errors import (
    ConfigMissing,
    ProviderDecodeError,
    ProviderError,
    ProviderHTTPError,
    ProviderTransportError,
    RelayError,
    RequestShapeError,
)
from .models.conversation_types import ContentEntry, ContentRole, ConversationRequest, Speaker, Turn
from .models.generation import ChatReply, GenerationConfig, ProviderType

__all__ = [
    # Main client
    "ChatRelay",
    "parse_request",

    # Configuration
    "RelaySettings",
    "ProviderCredentials",

    # Normalization
    "ConversationNormalizer",
    "NormalizePolicy",
    "SystemPreamble",
    "normalize",

    # Models
    "Speaker",
    "Turn",
    "ConversationRequest",
    "ContentRole",
    "ContentEntry",
    "GenerationConfig",
    "ChatReply",
    "ProviderType",

    # Errors
    "RelayError",
    "ConfigMissing",
    "RequestShapeError",
    "ProviderError",
    "ProviderTransportError",
    "ProviderHTTPError",
    "ProviderDecodeError",
]
