"""
Configuration module for the agent conversation demos.
Handles API keys, model settings, and system configuration.
"""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass
class ModelConfig:
    """Configuration for a hosted chat-completion model."""
    name: str
    api_key: Optional[str]
    model_id: str
    max_tokens: int = 1024
    temperature: float = 0.7


@dataclass
class SystemConfig:
    """System-wide configuration settings."""
    # Provider used when none is given on the command line
    provider: str = "openai"

    # Sentinel that ends a conversation loop
    termination_token: str = "TERMINATE"

    # Round caps for the two demos
    argumentary_max_rounds: int = 16
    multi_critic_max_rounds: int = 5

    # Whether to run in debug mode
    debug: bool = False

    # Directory the final drafts are written to
    output_dir: str = "."


# Model configurations
OPENAI_CONFIG = ModelConfig(
    name="GPT",
    api_key=os.getenv("OPENAI_API_KEY"),
    model_id=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
)

ANTHROPIC_CONFIG = ModelConfig(
    name="Claude",
    api_key=os.getenv("ANTHROPIC_API_KEY"),
    model_id=os.getenv("ANTHROPIC_MODEL", "claude-3-haiku-20240307"),
)

GOOGLE_CONFIG = ModelConfig(
    name="Gemini",
    api_key=os.getenv("GOOGLE_API_KEY"),
    model_id=os.getenv("GOOGLE_MODEL", "gemini-2.0-flash"),
)

XAI_CONFIG = ModelConfig(
    name="Grok",
    api_key=os.getenv("XAI_API_KEY"),
    model_id=os.getenv("XAI_MODEL", "grok-3-mini"),
)

# System configuration
SYSTEM_CONFIG = SystemConfig(
    provider=os.getenv("LLM_PROVIDER", "openai").lower(),
    debug=os.getenv("DEBUG", "false").lower() == "true",
    output_dir=os.getenv("OUTPUT_DIR", "."),
)

# All available providers
ALL_MODELS = {
    "openai": OPENAI_CONFIG,
    "anthropic": ANTHROPIC_CONFIG,
    "google": GOOGLE_CONFIG,
    "xai": XAI_CONFIG
}

# Environment variable holding each provider's key
API_KEY_ENV_VARS = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "google": "GOOGLE_API_KEY",
    "xai": "XAI_API_KEY"
}


def get_model_config(provider: str) -> ModelConfig:
    """Get configuration for a specific provider."""
    if provider.lower() not in ALL_MODELS:
        raise ValueError(f"Unknown provider: {provider}. Available: {list(ALL_MODELS.keys())}")
    return ALL_MODELS[provider.lower()]


def validate_api_keys() -> dict[str, bool]:
    """Check which API keys are configured."""
    return {
        name: config.api_key is not None and len(config.api_key) > 0
        for name, config in ALL_MODELS.items()
    }
