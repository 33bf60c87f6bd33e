"""
LLM Adapters - collect live responses for calibration runs
"""

from typing import Optional

from citedby.config import get_settings
from .base import (
    BaseLLMAdapter,
    LLMConfig,
    LLMMessage,
    LLMResponse,
    LLMUsage,
    LLMProviderType,
    LLMAdapterError,
    LLMRateLimitError,
    LLMAuthenticationError,
    LLMTimeoutError,
)
from .openai_adapter import OpenAIAdapter


def get_adapter(
    provider: str = "openai",
    api_key: Optional[str] = None,
    config: Optional[LLMConfig] = None
) -> BaseLLMAdapter:
    """
    Factory function to get the appropriate LLM adapter.

    Args:
        provider: Provider name, currently only "openai"
        api_key: Optional API key (uses env var if not provided)
        config: Optional LLM configuration

    Returns:
        Configured LLM adapter instance

    Raises:
        ValueError: If provider is not supported or no API key is configured
    """
    adapters = {
        "openai": OpenAIAdapter,
    }

    if provider not in adapters:
        raise ValueError(f"Unsupported provider: {provider}. Must be one of {list(adapters.keys())}")

    settings = get_settings()
    key = api_key or settings.OPENAI_API_KEY
    if not key:
        raise ValueError(f"No API key configured for provider: {provider}")

    config = config or LLMConfig(
        model=settings.OPENAI_DEFAULT_MODEL,
        temperature=settings.LLM_DEFAULT_TEMPERATURE,
        max_tokens=settings.LLM_DEFAULT_MAX_TOKENS,
        timeout=settings.LLM_REQUEST_TIMEOUT,
    )
    return adapters[provider](api_key=key, config=config)


__all__ = [
    # Factory
    "get_adapter",
    # Base classes
    "BaseLLMAdapter",
    "LLMConfig",
    "LLMMessage",
    "LLMResponse",
    "LLMUsage",
    "LLMProviderType",
    # Exceptions
    "LLMAdapterError",
    "LLMRateLimitError",
    "LLMAuthenticationError",
    "LLMTimeoutError",
    # Adapters
    "OpenAIAdapter",
]
