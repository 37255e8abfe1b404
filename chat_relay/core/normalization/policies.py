from enum import Enum

from pydantic import BaseModel, ConfigDict

from ...config.constants import DEFAULT_OPENING_LINE, DEFAULT_SYSTEM_INSTRUCTION


class NormalizePolicy(str, Enum):
    """How the caller's history is turned into provider contents."""

    PASSTHROUGH = "passthrough"
    PRIMED = "primed"
    # Drops the first two caller turns (a client-side greeting pair) before
    # priming. Couples the relay to one client's behavior; opt-in only.
    LEGACY_SKIP = "legacy_skip"
    PROMPT_FLATTEN = "prompt_flatten"


class SystemPreamble(BaseModel):
    """Persona seed for providers without a dedicated system field."""

    model_config = ConfigDict(frozen=True)

    instruction: str = DEFAULT_SYSTEM_INSTRUCTION
    opening_line: str = DEFAULT_OPENING_LINE
