from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

from ..errors import ProviderError

T = TypeVar("T")


@dataclass
class RetryConfig:
    # 1 means a single attempt; 2 allows one retry of a transient transport error
    max_attempts: int = 1
    initial_delay: float = 0.25
    max_delay: float = 2.0
    jitter: float = 0.25


class RetryManager:
    """
    Bounded retry for provider calls.

    Only errors flagged ``is_retryable`` (transport failures and timeouts) are
    retried. HTTP and decode errors from the provider are raised immediately.
    """

    def __init__(self, sleep: Callable[[float], Awaitable[None]] = asyncio.sleep):
        self._sleep = sleep

    async def execute_with_retry(self, func: Callable[[], Awaitable[T]], config: RetryConfig) -> T:
        """
        Execute ``func`` under ``config``.

        Raises:
            The last exception if it is not retryable or attempts are exhausted
        """
        attempt = 0
        while True:
            try:
                return await func()
            except ProviderError as e:
                attempt += 1
                if not self._should_retry(e, attempt, config):
                    raise
                await self._sleep(self._calculate_delay(config))

    def _should_retry(self, error: ProviderError, attempt: int, config: RetryConfig) -> bool:
        if attempt >= config.max_attempts:
            return False
        return error.is_retryable

    def _calculate_delay(self, config: RetryConfig) -> float:
        # Jitter spreads out workers that failed together
        delay = config.initial_delay + random.uniform(0, config.jitter)
        return min(delay, config.max_delay)
