"""
Anthropic Claude client implementation.
"""

from typing import List, Optional
from anthropic import AsyncAnthropic

from .base_client import BaseLLMClient
from config.config import ModelConfig, ANTHROPIC_CONFIG
from src.models.schemas import ChatCompletion, ChatMessage


class AnthropicClient(BaseLLMClient):
    """Client for Anthropic's Claude API."""

    def __init__(self, config: Optional[ModelConfig] = None):
        """
        Initialize the Anthropic client.

        Args:
            config: Model configuration, defaults to ANTHROPIC_CONFIG
        """
        config = config or ANTHROPIC_CONFIG
        super().__init__(config)

        if not config.api_key:
            raise ValueError("Anthropic API key not configured. Please set the ANTHROPIC_API_KEY environment variable.")

        self.client = AsyncAnthropic(api_key=config.api_key)

    async def chat(
        self,
        messages: List[ChatMessage],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        model_id: Optional[str] = None
    ) -> ChatCompletion:
        """
        Generate a reply using Claude.

        The system prompt goes in its own parameter and the remaining turns
        are merged so that roles alternate.
        """
        temperature, max_tokens, model_id = self._resolve(temperature, max_tokens, model_id)
        system_prompt, turns = self._split_system(messages)

        kwargs = {
            "model": model_id,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [
                {
                    "role": m.role.value,
                    "content": m.content
                }
                for m in turns
            ]
        }

        if system_prompt:
            kwargs["system"] = system_prompt

        response = await self.client.messages.create(**kwargs)

        text = "".join(
            block.text for block in response.content if getattr(block, "type", "text") == "text"
        )
        return ChatCompletion(
            content=text,
            model=response.model,
            prompt_tokens=response.usage.input_tokens,
            completion_tokens=response.usage.output_tokens
        )
