from __future__ import annotations

from typing import Any, Dict, List

from ...models.conversation_types import ContentRole, NormalizedContent
from ...models.generation import GenerationConfig

# Chat-completions names the model side "assistant"
_ROLE_NAMES = {
    ContentRole.USER: "user",
    ContentRole.MODEL: "assistant",
}


def build_messages(contents: NormalizedContent) -> List[Dict[str, str]]:
    return [{"role": _ROLE_NAMES[entry.role], "content": entry.text} for entry in contents]


def assemble_chat_completions_body(
    model: str,
    contents: NormalizedContent,
    config: GenerationConfig,
) -> Dict[str, Any]:
    """Build a chat-completions request body.

    top-k has no chat-completions equivalent and is not sent.
    """
    return {
        "model": model,
        "messages": build_messages(contents),
        "temperature": config.temperature,
        "top_p": config.top_p,
        "max_tokens": config.max_output_tokens,
        "stop": list(config.stop_sequences) or None,
    }
