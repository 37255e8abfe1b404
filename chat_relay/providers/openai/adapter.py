from typing import Any, Dict, Optional

from ...config.constants import OPENAI_BASE_URL
from ...config.settings import ProviderCredentials
from ...models.conversation_types import NormalizedContent
from ...models.generation import GenerationConfig
from ..base import ProviderAdapter
from .parsers import extract_text_from_chat_completion
from .payloads import assemble_chat_completions_body


class OpenAIProvider(ProviderAdapter):
    """OpenAI-style ``/chat/completions`` adapter, authenticated with a bearer token."""

    def default_base_url(self) -> str:
        return OPENAI_BASE_URL

    def endpoint_url(self) -> str:
        return f"{self.base_url}/chat/completions"

    def build_payload(self, contents: NormalizedContent, config: GenerationConfig) -> Dict[str, Any]:
        return assemble_chat_completions_body(self.model, contents, config)

    def auth(self, credentials: ProviderCredentials) -> Dict[str, Dict[str, str]]:
        return {"headers": {"Authorization": f"Bearer {credentials.reveal()}"}}

    def extract_reply(self, data: Any) -> Optional[str]:
        return extract_text_from_chat_completion(data)
