from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Speaker(str, Enum):
    """Caller-side speaker tags."""
    USER = "user"
    ASSISTANT = "assistant"


class ContentRole(str, Enum):
    """Provider-facing roles."""
    USER = "user"
    MODEL = "model"


class Turn(BaseModel):
    """One message of the caller's conversation.

    ``speaker`` is kept as a plain string so that unknown tags (``bot``,
    ``system``...) survive validation and are mapped by the normalizer.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    speaker: str = Field(..., alias="sender")
    text: str = ""

    @property
    def is_user(self) -> bool:
        return self.speaker == Speaker.USER.value


class ConversationRequest(BaseModel):
    """Inbound payload: a full history, a single message, or both.

    When both are present the single ``message`` is treated as the newest
    user turn and appended after ``messages``.
    """

    messages: Optional[List[Turn]] = None
    message: Optional[str] = None

    @model_validator(mode="after")
    def _require_turns(self):
        if not self.messages and self.message is None:
            raise ValueError("request must carry a non-empty 'messages' list or a 'message'")
        return self

    def turns(self) -> List[Turn]:
        turns = list(self.messages or [])
        if self.message is not None:
            turns.append(Turn(speaker=Speaker.USER.value, text=self.message))
        return turns


class ContentEntry(BaseModel):
    """One normalized element sent to the provider."""

    model_config = ConfigDict(frozen=True)

    role: ContentRole
    parts: List[str] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(self.parts)


NormalizedContent = List[ContentEntry]
