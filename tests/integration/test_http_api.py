"""End-to-end tests of the HTTP relay with a fake provider endpoint."""

import httpx
import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from chat_relay.api.client import ChatRelay
from chat_relay.config.constants import FALLBACK_REPLY
from chat_relay.errors import ConfigMissing
from chat_relay.http.app import create_app
from chat_relay.providers.gemini.adapter import GeminiProvider
from tests.helpers.provider_mocks import RecordingTransport, gemini_body, raise_error, respond_json, respond_text


def build_client(settings, transport, **app_kwargs):
    provider = GeminiProvider(model="gemini-test", client=transport.client())
    relay = ChatRelay(settings, provider=provider)
    return TestClient(create_app(relay=relay, **app_kwargs))


@pytest.mark.integration
class TestChatEndpoint:

    def test_history_request(self, relay_settings, gemini_transport):
        client = build_client(relay_settings, gemini_transport)

        response = client.post("/api/chat", json={
            "messages": [
                {"sender": "user", "text": "Hi"},
                {"sender": "bot", "text": "Hello!"},
                {"sender": "user", "text": "Where is order 12345?"},
            ]
        })

        assert response.status_code == 200
        assert response.json() == {"reply": "Test response"}
        assert [c["role"] for c in gemini_transport.last_json()["contents"]] == ["user", "model", "user"]

    def test_single_message_request(self, relay_settings, gemini_transport):
        client = build_client(relay_settings, gemini_transport)

        response = client.post("/api/chat", json={"message": "hello"})

        assert response.status_code == 200
        assert response.json()["reply"] == "Test response"

    def test_empty_messages_rejected_without_provider_call(self, relay_settings, gemini_transport):
        client = build_client(relay_settings, gemini_transport)

        response = client.post("/api/chat", json={"messages": []})

        assert response.status_code == 400
        assert response.json()["error"]["kind"] == "request_shape"
        assert gemini_transport.call_count == 0

    def test_malformed_json_rejected(self, relay_settings, gemini_transport):
        client = build_client(relay_settings, gemini_transport)

        response = client.post("/api/chat", content=b"{oops", headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json()["error"]["kind"] == "request_shape"
        assert gemini_transport.call_count == 0

    def test_provider_rate_limit_is_server_error(self, relay_settings):
        transport = RecordingTransport(respond_text('{"error":"rate limited"}', status_code=429))
        client = build_client(relay_settings, transport)

        response = client.post("/api/chat", json={"message": "hello"})

        assert response.status_code == 502
        error = response.json()["error"]
        assert error["kind"] == "provider_http"
        assert error["provider_status"] == 429
        assert "body" not in error
        assert "reply" not in response.json()

    def test_provider_body_exposed_when_enabled(self, relay_settings):
        settings = relay_settings.model_copy(update={"expose_provider_errors": True})
        transport = RecordingTransport(respond_text('{"error":"rate limited"}', status_code=429))
        client = build_client(settings, transport)

        response = client.post("/api/chat", json={"message": "hello"})

        assert response.json()["error"]["body"] == '{"error":"rate limited"}'

    def test_inline_errors(self, relay_settings):
        settings = relay_settings.model_copy(update={"inline_errors": True})
        transport = RecordingTransport(raise_error(httpx.ConnectError, "refused"))
        client = build_client(settings, transport)

        response = client.post("/api/chat", json={"message": "hello"})

        assert response.status_code == 200
        body = response.json()
        assert body["error"]["kind"] == "provider_transport"
        assert body["reply"] == body["error"]["message"]
        assert "refused" not in body["reply"]

    def test_timeout_maps_to_gateway_timeout(self, relay_settings):
        transport = RecordingTransport(raise_error(httpx.ReadTimeout, "slow"))
        client = build_client(relay_settings, transport)

        response = client.post("/api/chat", json={"message": "hello"})

        assert response.status_code == 504
        assert response.json()["error"]["kind"] == "provider_transport"

    def test_empty_candidates_fallback(self, relay_settings):
        transport = RecordingTransport(respond_json({"candidates": []}))
        client = build_client(relay_settings, transport)

        response = client.post("/api/chat", json={"message": "hello"})

        assert response.status_code == 200
        assert response.json() == {"reply": FALLBACK_REPLY}

    def test_reply_is_verbatim(self, relay_settings):
        text = "Line one\n\n* item *  "
        transport = RecordingTransport(respond_json(gemini_body(text)))
        client = build_client(relay_settings, transport)

        assert client.post("/api/chat", json={"message": "hi"}).json() == {"reply": text}

    def test_cors_preflight(self, relay_settings, gemini_transport):
        client = build_client(relay_settings, gemini_transport)

        response = client.options("/api/chat", headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        })

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert gemini_transport.call_count == 0

    def test_unexpected_error_keeps_cors_headers(self, relay_settings, gemini_transport):
        provider = GeminiProvider(model="gemini-test", client=gemini_transport.client())
        provider.generate = AsyncMock(side_effect=RuntimeError("unexpected"))
        client = TestClient(create_app(relay=ChatRelay(relay_settings, provider=provider)))

        response = client.post("/api/chat", json={"message": "hello"},
                               headers={"Origin": "http://localhost:3000"})

        assert response.status_code == 500
        assert response.json() == {"error": {"kind": "internal", "message": "internal server error"}}
        assert response.headers["access-control-allow-origin"] == "*"

    def test_health(self, relay_settings, gemini_transport):
        client = build_client(relay_settings, gemini_transport)
        assert client.get("/health").json() == {"status": "ok", "provider": "gemini"}


@pytest.mark.integration
class TestStartup:

    def test_missing_key_fails_at_startup(self, relay_settings, gemini_transport):
        settings = relay_settings.model_copy(update={"api_key": None})
        provider = GeminiProvider(model="gemini-test", client=gemini_transport.client())

        with pytest.raises(ConfigMissing):
            create_app(relay=ChatRelay(settings, provider=provider))

    def test_missing_key_per_request(self, relay_settings, gemini_transport):
        settings = relay_settings.model_copy(update={"api_key": None})
        client = build_client(settings, gemini_transport, validate_credentials=False)

        response = client.post("/api/chat", json={"message": "hello"})

        assert response.status_code == 500
        assert response.json()["error"]["kind"] == "config_missing"
        assert gemini_transport.call_count == 0

    def test_create_app_from_env(self, mock_env_vars):
        app = create_app()
        assert app.state.relay.settings.provider.value == "gemini"
