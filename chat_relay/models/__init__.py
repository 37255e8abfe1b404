"""Data models for the chat relay."""

from .conversation_types import (
    ContentEntry,
    ContentRole,
    ConversationRequest,
    NormalizedContent,
    Speaker,
    Turn,
)
from .generation import ChatReply, ErrorDetail, ErrorReply, GenerationConfig, ProviderType

__all__ = [
    # Conversation models
    "Speaker",
    "Turn",
    "ConversationRequest",
    "ContentRole",
    "ContentEntry",
    "NormalizedContent",

    # Generation models
    "ProviderType",
    "GenerationConfig",
    "ChatReply",
    "ErrorDetail",
    "ErrorReply",
]
