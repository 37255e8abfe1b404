"""
Structured logging utility for the relay.

Log lines carry standard ``key=value`` fields (provider, model, request_id) so
that a request can be followed from normalization to the provider call.
Credentials are never passed to these helpers.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import Any, Optional


class ProviderLogger:
    """Structured logger bound to one provider name."""

    def __init__(self, provider_name: str):
        """
        Initialize logger for one provider.

        Args:
            provider_name: Name of the provider (e.g., "gemini", "openai"), or
                "relay" for the request-level logger
        """
        self.provider = provider_name
        self.logger = logging.getLogger(f"chat_relay.providers.{provider_name}")

    def _format_message(self, message: str, **kwargs) -> str:
        """Prefix message with provider and the non-empty structured fields."""
        fields = [f"provider={self.provider}"]
        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")
        return f"[{' '.join(fields)}] {message}"

    def debug(self, message: str, model: Optional[str] = None,
              request_id: Optional[str] = None, **kwargs):
        """Log debug message with structured fields."""
        self.logger.debug(
            self._format_message(message, model=model, request_id=request_id, **kwargs)
        )

    def info(self, message: str, model: Optional[str] = None,
             request_id: Optional[str] = None, **kwargs):
        """Log info message with structured fields."""
        self.logger.info(
            self._format_message(message, model=model, request_id=request_id, **kwargs)
        )

    def warning(self, message: str, model: Optional[str] = None,
                request_id: Optional[str] = None, **kwargs):
        """Log warning message with structured fields."""
        self.logger.warning(
            self._format_message(message, model=model, request_id=request_id, **kwargs)
        )

    def error(self, message: str, model: Optional[str] = None,
              request_id: Optional[str] = None, error: Optional[Exception] = None, **kwargs):
        """Log error message with structured fields, including the exception type and text."""
        if error:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)
        self.logger.error(
            self._format_message(message, model=model, request_id=request_id, **kwargs)
        )

    @contextmanager
    def track_request(self, method: str, model: str, request_id: Optional[str] = None):
        """
        Track timing of one provider call and log its outcome.

        Yields:
            Dict with request metadata including request_id
        """
        if request_id is None:
            request_id = str(uuid.uuid4())[:8]

        start_time = time.time()
        self.debug(f"Starting {method} request", model=model, request_id=request_id)

        metadata = {
            'request_id': request_id,
            'model': model,
            'method': method,
            'start_time': start_time
        }

        try:
            yield metadata
            duration = time.time() - start_time
            self.info(
                f"Completed {method} request",
                model=model,
                request_id=request_id,
                duration_ms=int(duration * 1000)
            )
        except Exception as e:
            duration = time.time() - start_time
            self.error(
                f"Failed {method} request",
                model=model,
                request_id=request_id,
                duration_ms=int(duration * 1000),
                error=e
            )
            raise

    def log_empty_candidates(self, structure: Any, model: str, request_id: str):
        """Record a response that carried no usable text (e.g. safety filtering)."""
        self.warning(
            "Provider returned no candidate text, using fallback reply",
            model=model,
            request_id=request_id,
            response=structure,
        )


def configure_logging(level: str = "INFO") -> None:
    """Set a basic log format and keep httpx from logging request URLs."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    # Gemini carries the API key in the query string
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
