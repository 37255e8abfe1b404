from __future__ import annotations

from typing import Any, Dict, List

from ...models.conversation_types import NormalizedContent
from ...models.generation import GenerationConfig


def build_contents(contents: NormalizedContent) -> List[Dict[str, Any]]:
    """Render normalized entries as Gemini ``contents`` items."""
    return [
        {
            "role": entry.role.value,
            "parts": [{"text": part} for part in entry.parts],
        }
        for entry in contents
    ]


def assemble_generate_content_body(contents: NormalizedContent, config: GenerationConfig) -> Dict[str, Any]:
    """Build the ``generateContent`` request body.

    All five generation fields are always present; ``stopSequences`` is an
    empty list when no stop sequence is configured.
    """
    return {
        "contents": build_contents(contents),
        "generationConfig": config.to_payload(),
    }
