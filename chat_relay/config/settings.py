"""
Runtime settings for the relay.

Settings are read once (``RelaySettings.from_env``) and passed explicitly to
the relay and the provider adapters. ``require_credentials`` is the single
place that decides whether the relay may call the provider at all.
"""

import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr

from ..core.normalization.policies import NormalizePolicy, SystemPreamble
from ..errors import ConfigMissing
from ..models.generation import GenerationConfig, ProviderType
from .constants import (
    API_KEY_ENV_VARS,
    DEFAULT_MODELS,
    DEFAULT_OPENING_LINE,
    DEFAULT_SYSTEM_INSTRUCTION,
    DEFAULT_TIMEOUT_SECONDS,
)

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ProviderCredentials(BaseModel):
    """Opaque provider credentials. ``SecretStr`` keeps the key out of reprs and logs."""

    api_key: SecretStr

    def reveal(self) -> str:
        return self.api_key.get_secret_value()


class RelaySettings(BaseModel):
    """Deployment configuration of the relay."""

    provider: ProviderType = ProviderType.GEMINI
    api_key: Optional[SecretStr] = None
    model: Optional[str] = None
    base_url: Optional[str] = None
    policy: NormalizePolicy = NormalizePolicy.PRIMED
    preamble: SystemPreamble = Field(default_factory=SystemPreamble)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    max_attempts: int = Field(default=1, ge=1, le=2)
    inline_errors: bool = False
    expose_provider_errors: bool = False

    @property
    def model_name(self) -> str:
        return self.model or DEFAULT_MODELS[self.provider.value]

    def require_credentials(self) -> ProviderCredentials:
        """Return the provider credentials or fail fast.

        Raises:
            ConfigMissing: no API key is configured
        """
        if self.api_key is None or not self.api_key.get_secret_value().strip():
            names = " or ".join(API_KEY_ENV_VARS[self.provider.value])
            raise ConfigMissing(f"{self.provider.value} API key not configured (set {names})")
        return ProviderCredentials(api_key=self.api_key)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, load_env_file: bool = True) -> "RelaySettings":
        """
        Build settings from environment variables.

        Args:
            env: Mapping to read instead of ``os.environ`` (used by tests)
            load_env_file: Load a ``.env`` file into ``os.environ`` first
        """
        if env is None:
            if load_env_file:
                load_dotenv()
            env = os.environ

        provider = ProviderType(env.get("RELAY_PROVIDER", ProviderType.GEMINI.value).lower())

        api_key = None
        for name in API_KEY_ENV_VARS[provider.value]:
            if env.get(name):
                api_key = SecretStr(env[name])
                break

        generation_overrides = {}
        for field_name, var in (
            ("temperature", "RELAY_TEMPERATURE"),
            ("top_k", "RELAY_TOP_K"),
            ("top_p", "RELAY_TOP_P"),
            ("max_output_tokens", "RELAY_MAX_OUTPUT_TOKENS"),
        ):
            if env.get(var):
                generation_overrides[field_name] = env[var]
        if env.get("RELAY_STOP_SEQUENCES"):
            generation_overrides["stop_sequences"] = [
                s for s in env["RELAY_STOP_SEQUENCES"].split(",") if s
            ]

        return cls(
            provider=provider,
            api_key=api_key,
            model=env.get("RELAY_MODEL") or None,
            base_url=env.get("RELAY_BASE_URL") or None,
            policy=NormalizePolicy(env.get("RELAY_NORMALIZE_POLICY", NormalizePolicy.PRIMED.value)),
            preamble=SystemPreamble(
                instruction=env.get("RELAY_SYSTEM_INSTRUCTION", DEFAULT_SYSTEM_INSTRUCTION),
                opening_line=env.get("RELAY_OPENING_LINE", DEFAULT_OPENING_LINE),
            ),
            generation=GenerationConfig(**generation_overrides),
            timeout_seconds=float(env.get("RELAY_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)),
            max_attempts=int(env.get("RELAY_MAX_ATTEMPTS", 1)),
            inline_errors=env.get("RELAY_INLINE_ERRORS", "").lower() in _TRUE_VALUES,
            expose_provider_errors=env.get("RELAY_EXPOSE_PROVIDER_ERRORS", "").lower() in _TRUE_VALUES,
        )
