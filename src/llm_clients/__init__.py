"""LLM Client implementations for various providers."""

from typing import Optional

from config.config import get_model_config
from .base_client import BaseLLMClient
from .openai_client import OpenAIClient
from .anthropic_client import AnthropicClient
from .google_client import GoogleClient
from .xai_client import XAIClient

CLIENT_CLASSES = {
    "openai": OpenAIClient,
    "anthropic": AnthropicClient,
    "google": GoogleClient,
    "xai": XAIClient
}


def create_client(provider: str = "openai", model_id: Optional[str] = None) -> BaseLLMClient:
    """
    Create a client for a provider.

    Args:
        provider: Provider key (openai, anthropic, google, xai)
        model_id: Model to use instead of the configured default

    Returns:
        A ready client; raises ValueError for an unknown provider or missing key
    """
    config = get_model_config(provider)
    client = CLIENT_CLASSES[provider.lower()](config)
    if model_id:
        client.model_id = model_id
    return client


__all__ = [
    "BaseLLMClient",
    "OpenAIClient",
    "AnthropicClient",
    "GoogleClient",
    "XAIClient",
    "CLIENT_CLASSES",
    "create_client"
]
