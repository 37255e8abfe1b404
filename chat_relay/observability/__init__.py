"""Observability layer: structured logging for relay requests."""

from .logging import ProviderLogger, configure_logging

__all__ = ["ProviderLogger", "configure_logging"]
