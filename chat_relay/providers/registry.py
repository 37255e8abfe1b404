from typing import Dict, Optional, Type

import httpx

from ..config.settings import RelaySettings
from ..models.generation import ProviderType
from .base import ProviderAdapter
from .gemini.adapter import GeminiProvider
from .openai.adapter import OpenAIProvider

PROVIDER_ADAPTERS: Dict[ProviderType, Type[ProviderAdapter]] = {
    ProviderType.GEMINI: GeminiProvider,
    ProviderType.OPENAI: OpenAIProvider,
}


def get_provider(settings: RelaySettings, client: Optional[httpx.AsyncClient] = None) -> ProviderAdapter:
    """Create the adapter configured by ``settings.provider``."""
    adapter_cls = PROVIDER_ADAPTERS[settings.provider]
    return adapter_cls(
        model=settings.model_name,
        base_url=settings.base_url,
        timeout_seconds=settings.timeout_seconds,
        client=client,
    )
