"""Public client API for the chat relay."""

from .client import ChatRelay, parse_request

__all__ = ["ChatRelay", "parse_request"]
