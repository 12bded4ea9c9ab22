"""
OpenAI GPT client implementation.
Uses the max_completion_tokens parameter required by newer models.
"""

from typing import List, Optional
from openai import AsyncOpenAI

from .base_client import BaseLLMClient
from config.config import ModelConfig, OPENAI_CONFIG
from src.models.schemas import ChatCompletion, ChatMessage


class OpenAIClient(BaseLLMClient):
    """Client for OpenAI's chat completions API."""

    def __init__(self, config: Optional[ModelConfig] = None):
        """
        Initialize the OpenAI client.

        Args:
            config: Model configuration, defaults to OPENAI_CONFIG
        """
        config = config or OPENAI_CONFIG
        super().__init__(config)

        if not config.api_key:
            raise ValueError("OpenAI API key not configured. Please set the OPENAI_API_KEY environment variable.")

        self.client = AsyncOpenAI(api_key=config.api_key)

    async def chat(
        self,
        messages: List[ChatMessage],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        model_id: Optional[str] = None
    ) -> ChatCompletion:
        """
        Generate a reply using OpenAI GPT.

        Args:
            messages: Role-tagged conversation
            temperature: Override temperature
            max_tokens: Override max tokens
            model_id: Override model

        Returns:
            The reply with token usage
        """
        temperature, max_tokens, model_id = self._resolve(temperature, max_tokens, model_id)

        response = await self.client.chat.completions.create(
            model=model_id,
            messages=[{"role": m.role.value, "content": m.content} for m in messages],
            temperature=temperature,
            max_completion_tokens=max_tokens
        )

        usage = response.usage
        return ChatCompletion(
            content=response.choices[0].message.content,
            model=response.model,
            prompt_tokens=usage.prompt_tokens if usage else 0,
            completion_tokens=usage.completion_tokens if usage else 0
        )
