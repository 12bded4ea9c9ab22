"""
xAI Grok client implementation.
Uses the OpenAI-compatible API endpoint.
"""

from typing import List, Optional
from openai import AsyncOpenAI

from .base_client import BaseLLMClient
from config.config import ModelConfig, XAI_CONFIG
from src.models.schemas import ChatCompletion, ChatMessage

XAI_BASE_URL = "https://api.x.ai/v1"


class XAIClient(BaseLLMClient):
    """Client for xAI's Grok API (OpenAI-compatible)."""

    def __init__(self, config: Optional[ModelConfig] = None):
        config = config or XAI_CONFIG
        super().__init__(config)

        if not config.api_key:
            raise ValueError("xAI API key not configured. Please set the XAI_API_KEY environment variable.")

        self.client = AsyncOpenAI(
            api_key=config.api_key,
            base_url=XAI_BASE_URL
        )

    async def chat(
        self,
        messages: List[ChatMessage],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        model_id: Optional[str] = None
    ) -> ChatCompletion:
        temperature, max_tokens, model_id = self._resolve(temperature, max_tokens, model_id)

        # Grok still takes the older max_tokens parameter
        response = await self.client.chat.completions.create(
            model=model_id,
            messages=[{"role": m.role.value, "content": m.content} for m in messages],
            temperature=temperature,
            max_tokens=max_tokens
        )

        usage = response.usage
        return ChatCompletion(
            content=response.choices[0].message.content,
            model=response.model,
            prompt_tokens=usage.prompt_tokens if usage else 0,
            completion_tokens=usage.completion_tokens if usage else 0
        )
