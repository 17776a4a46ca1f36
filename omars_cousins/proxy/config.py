"""Proxy configuration with environment variable loading.

Pydantic-based configuration for the upstream chat-completions call.
Supports OpenAI and OpenAI-compatible APIs via custom base URL.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_PROMPT_TEMPLATE = (
    "You are Omar's Arab cousin. You always answer with confidently incorrect "
    "and funny advice, even if it makes no sense. Here is the question: {question}"
)


class ProxyConfig(BaseModel):
    """Configuration for the Omar's cousins proxy.

    Attributes:
        api_key: Bearer token for the upstream API.
        base_url: API base URL, ``/chat/completions`` is appended.
        model_name: Model identifier to use.
        max_tokens: Maximum tokens in generated response.
        prompt_template: Persona prompt with a ``{question}`` placeholder.
        timeout: Seconds to wait for the upstream response.
    """

    # Environment-provided defaults go through the validators too
    model_config = ConfigDict(validate_default=True)

    api_key: str = Field(
        default_factory=lambda: os.getenv("LLM_API_KEY", os.getenv("OPENAI_API_KEY", "")),
        description="API key for LLM provider",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or DEFAULT_BASE_URL,
        description="API base URL",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", "gpt-3.5-turbo"),
        description="Model to use",
    )
    max_tokens: int = Field(
        default=200,
        ge=1,
        le=4096,
        description="Maximum tokens in generated response",
    )
    prompt_template: str = Field(
        default_factory=lambda: os.getenv("PERSONA_PROMPT") or DEFAULT_PROMPT_TEMPLATE,
        description="Persona prompt template",
    )
    timeout: float = Field(default=60.0, gt=0.0, description="Upstream timeout in seconds")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError(
                "API key required. Set LLM_API_KEY or OPENAI_API_KEY in .env"
            )
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("prompt_template")
    @classmethod
    def validate_prompt_template(cls, v: str) -> str:
        """Validate that the template embeds the question."""
        if "{question}" not in v:
            raise ValueError("prompt_template must contain a {question} placeholder")
        return v


def get_proxy_config() -> ProxyConfig:
    """Create proxy configuration from environment.

    Returns:
        Configured ProxyConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return ProxyConfig()
