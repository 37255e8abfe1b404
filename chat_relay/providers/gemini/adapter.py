from typing import Any, Dict, Optional

from ...config.constants import GEMINI_BASE_URL
from ...config.settings import ProviderCredentials
from ...models.conversation_types import NormalizedContent
from ...models.generation import GenerationConfig
from ..base import ProviderAdapter
from .parsers import extract_text_from_generate_content
from .payloads import assemble_generate_content_body


class GeminiProvider(ProviderAdapter):
    """Google Gemini ``generateContent`` adapter.

    The API key travels as the ``key`` query parameter.
    """

    def default_base_url(self) -> str:
        return GEMINI_BASE_URL

    def endpoint_url(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def build_payload(self, contents: NormalizedContent, config: GenerationConfig) -> Dict[str, Any]:
        return assemble_generate_content_body(contents, config)

    def auth(self, credentials: ProviderCredentials) -> Dict[str, Dict[str, str]]:
        return {"params": {"key": credentials.reveal()}}

    def extract_reply(self, data: Any) -> Optional[str]:
        return extract_text_from_generate_content(data)
