"""Agent configuration with environment variable loading.

Pydantic-based configuration for the Agno chat agent.
Supports Gemini (default) and OpenAI or OpenAI-compatible APIs via custom base URL.
"""

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.models.schemas import FragmentMode

# Load environment variables from .env file
load_dotenv()

DEFAULT_SYSTEM_INSTRUCTION = (
    "You are a helpful, intelligent, and articulate NLP assistant. You are capable of "
    "complex reasoning, coding tasks, and maintaining long, multi-turn conversations "
    "with context awareness."
)

_DEFAULT_MODELS = {
    "gemini": "gemini-2.5-flash",
    "openai": "gpt-4o-mini",
}

_PROVIDER_KEY_VARS = {
    "gemini": ("GOOGLE_API_KEY", "GEMINI_API_KEY"),
    "openai": ("OPENAI_API_KEY",),
}


class AgentConfig(BaseModel):
    """Configuration for the Agno chat agent.

    Attributes:
        provider: Model provider, "gemini" or "openai".
        api_key: API key for model access.
        base_url: API base URL for OpenAI-compatible providers (None for default).
        model_name: Model identifier to use (provider default when empty).
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_tokens: Maximum tokens in generated response.
        history_runs: Number of previous turns sent back to the model as context.
        fragment_mode: Whether streamed fragments are deltas or cumulative text.
        system_instruction: System prompt given once when the chat starts.
    """

    model_config = ConfigDict(validate_default=True)

    provider: Literal["gemini", "openai"] = Field(
        default_factory=lambda: os.getenv("LLM_PROVIDER", "gemini").strip().lower(),
        description="Model provider",
    )
    api_key: str = Field(
        default_factory=lambda: os.getenv("LLM_API_KEY", ""),
        description="API key for LLM provider",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="API base URL (None for provider default)",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", ""),
        description="Model to use",
    )
    temperature: float = Field(
        default_factory=lambda: float(os.getenv("LLM_TEMPERATURE", "0.7")),
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_tokens: int = Field(
        default_factory=lambda: int(os.getenv("LLM_MAX_TOKENS", "2048")),
        ge=1,
        le=128000,
        description="Maximum tokens in generated response",
    )
    history_runs: int = Field(
        default_factory=lambda: int(os.getenv("LLM_HISTORY_RUNS", "10")),
        ge=1,
        le=100,
        description="Previous turns included as context",
    )
    fragment_mode: FragmentMode = Field(
        default_factory=lambda: FragmentMode(os.getenv("FRAGMENT_MODE", "delta").lower()),
        description="Emission convention of streamed fragments",
    )
    system_instruction: str = Field(
        default_factory=lambda: os.getenv("SYSTEM_INSTRUCTION", DEFAULT_SYSTEM_INSTRUCTION),
        description="System prompt for the chat session",
    )

    @model_validator(mode="before")
    @classmethod
    def fill_provider_defaults(cls, data: object) -> object:
        """Fall back to provider-specific key variables and default model."""
        if not isinstance(data, dict):
            return data
        provider = str(
            data.get("provider") or os.getenv("LLM_PROVIDER", "gemini")
        ).strip().lower()
        if not data.get("api_key") and not os.getenv("LLM_API_KEY"):
            for var in _PROVIDER_KEY_VARS.get(provider, ()):
                if os.getenv(var):
                    data = {**data, "api_key": os.environ[var]}
                    break
        if not data.get("model_name") and not os.getenv("LLM_MODEL"):
            data = {**data, "model_name": _DEFAULT_MODELS.get(provider, "")}
        return data

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError(
                "API key required. Set LLM_API_KEY (or GOOGLE_API_KEY / OPENAI_API_KEY) in .env"
            )
        return v.strip()

    @field_validator("model_name")
    @classmethod
    def validate_model_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Model name required. Set LLM_MODEL in .env")
        return v.strip()


def get_agent_config() -> AgentConfig:
    """Create agent configuration from environment.

    Returns:
        Configured AgentConfig instance.

    Raises:
        ValidationError: If no API key is set or a value is out of range.
    """
    return AgentConfig()
