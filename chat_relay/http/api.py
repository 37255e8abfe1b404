"""FastAPI HTTP endpoints for the chat relay.

The router reads the relay from ``request.app.state.relay`` so that one relay
(and one HTTP client) is shared by all requests of an application.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..api.client import ChatRelay
from ..errors import ProviderHTTPError, RelayError
from ..models.generation import ChatReply, ErrorDetail, ErrorReply

router = APIRouter()


def get_relay(request: Request) -> ChatRelay:
    return request.app.state.relay


@router.post("/chat", response_model=ChatReply)
async def chat(request: Request):
    """Relay a conversation (``messages``) or a single ``message`` to the provider."""
    relay = get_relay(request)
    body = await request.body()
    return await relay.reply_to_payload(body)


def error_response(error: RelayError, inline: bool = False, expose_provider_body: bool = False) -> JSONResponse:
    """
    Render a relay error as JSON.

    With ``inline`` the status is 200 and the message is also put in
    ``reply`` so a chat UI can show it as a bot message.
    """
    detail = ErrorDetail(kind=error.kind, message=error.message)
    if isinstance(error, ProviderHTTPError):
        detail.provider_status = error.provider_status
        if expose_provider_body:
            detail.body = error.body

    payload = ErrorReply(error=detail, reply=error.message if inline else None)
    status_code = 200 if inline else error.status_code
    return JSONResponse(status_code=status_code, content=payload.model_dump(exclude_none=True))


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    settings = get_relay(request).settings
    return error_response(
        exc,
        inline=settings.inline_errors,
        expose_provider_body=settings.expose_provider_errors,
    )
