"""Core request-shaping logic."""

from .normalization import ConversationNormalizer, NormalizePolicy, SystemPreamble, normalize

__all__ = [
    "ConversationNormalizer",
    "NormalizePolicy",
    "SystemPreamble",
    "normalize",
]
