from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProviderType(str, Enum):
    """Supported generation providers."""
    GEMINI = "gemini"
    OPENAI = "openai"


class GenerationConfig(BaseModel):
    """
    Sampling parameters attached to every provider call.

    Field names follow Python conventions; the aliases are the provider wire
    names. ``to_payload`` always emits all five fields so that the outbound
    request is identical for identical inputs.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    temperature: float = Field(default=0.9, ge=0.0, le=2.0, alias="temperature")
    top_k: int = Field(default=1, ge=1, alias="topK")
    top_p: float = Field(default=1.0, ge=0.0, le=1.0, alias="topP")
    max_output_tokens: int = Field(default=2048, ge=1, alias="maxOutputTokens")
    stop_sequences: List[str] = Field(default_factory=list, alias="stopSequences")

    def to_payload(self) -> Dict[str, Any]:
        payload = self.model_dump(by_alias=True)
        payload["stopSequences"] = list(self.stop_sequences)
        return payload


class ChatReply(BaseModel):
    """Response returned to the caller on success."""
    reply: str


class ErrorDetail(BaseModel):
    kind: str
    message: str
    provider_status: Optional[int] = None
    body: Optional[str] = None


class ErrorReply(BaseModel):
    """Structured failure payload; ``reply`` is set only for inline errors."""
    error: ErrorDetail
    reply: Optional[str] = None
