"""
Provider Adapters Layer

Each adapter translates normalized contents and generation config into one
provider's HTTP request, and the provider's response back into reply text.
"""

from .base import ProviderAdapter, ProviderError
from .gemini.adapter import GeminiProvider
from .openai.adapter import OpenAIProvider
from .registry import PROVIDER_ADAPTERS, get_provider

__all__ = [
    "ProviderAdapter",
    "ProviderError",
    "GeminiProvider",
    "OpenAIProvider",
    "PROVIDER_ADAPTERS",
    "get_provider",
]
