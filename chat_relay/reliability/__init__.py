"""Reliability layer: bounded retry of transient provider failures."""

from .retry import RetryConfig, RetryManager

__all__ = ["RetryConfig", "RetryManager"]
