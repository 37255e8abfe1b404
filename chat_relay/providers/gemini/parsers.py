from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from ..errors import ErrorMapper


class GeminiPart(BaseModel):
    model_config = ConfigDict(extra="allow")

    text: Optional[str] = None


class GeminiContent(BaseModel):
    model_config = ConfigDict(extra="allow")

    role: Optional[str] = None
    parts: Optional[List[GeminiPart]] = None


class GeminiCandidate(BaseModel):
    model_config = ConfigDict(extra="allow")

    content: Optional[GeminiContent] = None
    finishReason: Optional[str] = None


class GeminiResponse(BaseModel):
    """Subset of the ``generateContent`` response the relay relies on."""

    model_config = ConfigDict(extra="allow")

    candidates: Optional[List[GeminiCandidate]] = None


def extract_text_from_generate_content(data: Any) -> Optional[str]:
    """Return the first candidate's first text part verbatim.

    None means the response was well formed but carried no text (no
    candidates, or a candidate without text parts, as with safety blocks).
    """
    try:
        response = GeminiResponse.model_validate(data)
    except ValidationError as e:
        raise ErrorMapper.map_decode_error(e, "gemini")

    if not response.candidates:
        return None
    content = response.candidates[0].content
    if content is None:
        return None
    for part in content.parts or []:
        if part.text is not None:
            return part.text
    return None
