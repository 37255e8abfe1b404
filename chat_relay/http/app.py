import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..api.client import ChatRelay
from ..config.settings import RelaySettings
from ..errors import RelayError
from .api import relay_error_handler, router

logger = logging.getLogger(__name__)


async def unexpected_error_middleware(request: Request, call_next):
    """Answer unexpected failures with JSON from inside the CORS layer."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error while relaying chat request")
        return JSONResponse(
            status_code=500,
            content={"error": {"kind": "internal", "message": "internal server error"}},
        )


def create_app(
    settings: Optional[RelaySettings] = None,
    relay: Optional[ChatRelay] = None,
    validate_credentials: bool = True,
) -> FastAPI:
    """
    Build the relay application.

    Args:
        settings: Settings to use; read from the environment when omitted
        relay: Prebuilt relay (tests inject one with a fake provider)
        validate_credentials: Fail at startup when the API key is missing

    Raises:
        ConfigMissing: ``validate_credentials`` is set and no API key is configured
    """
    if relay is None:
        settings = settings or RelaySettings.from_env()
        if validate_credentials:
            settings.require_credentials()
        relay = ChatRelay(settings)
    elif validate_credentials:
        relay.settings.require_credentials()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Chat relay starting: provider=%s model=%s policy=%s",
            relay.settings.provider.value,
            relay.provider.model,
            relay.normalizer.policy.value,
        )
        yield
        await relay.aclose()

    app = FastAPI(title="Chat Relay", version=__version__, lifespan=lifespan)
    app.state.relay = relay

    # Middleware added later wraps earlier middleware; CORS must be outermost
    app.middleware("http")(unexpected_error_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.add_exception_handler(RelayError, relay_error_handler)

    app.include_router(router, prefix="/api")

    @app.get("/health")
    async def health():
        return {"status": "ok", "provider": relay.settings.provider.value}

    return app
