"""Shared pytest fixtures for chat relay tests."""

import pytest
from pydantic import SecretStr

from chat_relay.config.settings import ProviderCredentials, RelaySettings
from chat_relay.core.normalization import NormalizePolicy, SystemPreamble
from chat_relay.models.conversation_types import Turn
from chat_relay.models.generation import GenerationConfig, ProviderType
from chat_relay.providers.gemini.adapter import GeminiProvider
from chat_relay.providers.openai.adapter import OpenAIProvider
from tests.helpers.provider_mocks import RecordingTransport, gemini_body, respond_json


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Mock environment variables for testing."""
    env_vars = {
        "RELAY_PROVIDER": "gemini",
        "GEMINI_API_KEY": "test-gemini-key",
        "OPENAI_API_KEY": "test-openai-key",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def credentials():
    return ProviderCredentials(api_key=SecretStr("test-gemini-key"))


@pytest.fixture
def generation_config():
    return GenerationConfig()


@pytest.fixture
def preamble():
    return SystemPreamble(instruction="You are a test bot.", opening_line="Hi, I am the test bot.")


@pytest.fixture
def relay_settings(preamble):
    """Gemini settings with a key and pass-through normalization."""
    return RelaySettings(
        provider=ProviderType.GEMINI,
        api_key=SecretStr("test-gemini-key"),
        model="gemini-test",
        policy=NormalizePolicy.PASSTHROUGH,
        preamble=preamble,
    )


@pytest.fixture
def sample_turns():
    """Sample conversation ending with a user turn."""
    return [
        Turn(speaker="user", text="Where is my order?"),
        Turn(speaker="assistant", text="Could you share the order ID?"),
        Turn(speaker="user", text="It is 12345."),
    ]


@pytest.fixture
def gemini_transport():
    """Provider endpoint answering every call with ``"Test response"``."""
    return RecordingTransport(respond_json(gemini_body("Test response")))


@pytest.fixture
def gemini_provider(gemini_transport):
    return GeminiProvider(model="gemini-test", client=gemini_transport.client())


@pytest.fixture
def openai_provider_factory():
    def factory(transport: RecordingTransport) -> OpenAIProvider:
        return OpenAIProvider(model="gpt-test", client=transport.client())
    return factory


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: tests that drive the HTTP app end to end")
