from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from ..errors import ErrorMapper


class ChatMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    role: Optional[str] = None
    content: Optional[str] = None


class ChatChoice(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: Optional[ChatMessage] = None
    finish_reason: Optional[str] = None


class ChatCompletion(BaseModel):
    model_config = ConfigDict(extra="allow")

    choices: Optional[List[ChatChoice]] = None


def extract_text_from_chat_completion(data: Any) -> Optional[str]:
    """Return ``choices[0].message.content`` verbatim, or None when absent."""
    try:
        completion = ChatCompletion.model_validate(data)
    except ValidationError as e:
        raise ErrorMapper.map_decode_error(e, "openai")

    if not completion.choices:
        return None
    message = completion.choices[0].message
    if message is None:
        return None
    return message.content
