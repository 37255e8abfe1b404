"""Conversation normalization: caller turns to provider contents."""

from .conversation import ConversationNormalizer, flatten_prompt, normalize, role_for
from .policies import NormalizePolicy, SystemPreamble

__all__ = [
    "ConversationNormalizer",
    "NormalizePolicy",
    "SystemPreamble",
    "flatten_prompt",
    "normalize",
    "role_for",
]
