"""Relay configuration.

Runtime settings live in ``chat_relay.config.settings``; this package only
re-exports the static defaults so that low-level modules can import them
without pulling in the settings loader.
"""

from .constants import (
    DEFAULT_MODELS,
    DEFAULT_OPENING_LINE,
    DEFAULT_SYSTEM_INSTRUCTION,
    DEFAULT_TIMEOUT_SECONDS,
    FALLBACK_REPLY,
    GEMINI_BASE_URL,
    OPENAI_BASE_URL,
)

__all__ = [
    "DEFAULT_MODELS",
    "DEFAULT_OPENING_LINE",
    "DEFAULT_SYSTEM_INSTRUCTION",
    "DEFAULT_TIMEOUT_SECONDS",
    "FALLBACK_REPLY",
    "GEMINI_BASE_URL",
    "OPENAI_BASE_URL",
]
