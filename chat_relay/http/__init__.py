"""HTTP surface for the chat relay (requires FastAPI)."""

from .api import error_response, router
from .app import create_app

__all__ = ["create_app", "error_response", "router"]
