"""
Google Gemini client implementation using the google-genai SDK.
"""

from typing import List, Optional
from google import genai
from google.genai import types

from .base_client import BaseLLMClient
from config.config import ModelConfig, GOOGLE_CONFIG
from src.models.schemas import ChatCompletion, ChatMessage, Role


class GoogleClient(BaseLLMClient):
    """Client for Google's Gemini API."""

    def __init__(self, config: Optional[ModelConfig] = None):
        config = config or GOOGLE_CONFIG
        super().__init__(config)

        if not config.api_key:
            raise ValueError("Google API key not configured. Please set the GOOGLE_API_KEY environment variable.")

        self.client = genai.Client(api_key=config.api_key)

    async def chat(
        self,
        messages: List[ChatMessage],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        model_id: Optional[str] = None
    ) -> ChatCompletion:
        """
        Generate a reply using Gemini.

        Gemini names the assistant role "model" and takes the system
        prompt as a system instruction.
        """
        temperature, max_tokens, model_id = self._resolve(temperature, max_tokens, model_id)
        system_prompt, turns = self._split_system(messages)

        generation_config = types.GenerateContentConfig(
            temperature=temperature,
            max_output_tokens=max_tokens,
            system_instruction=system_prompt if system_prompt else None
        )

        contents = [
            types.Content(
                role="model" if m.role == Role.ASSISTANT else "user",
                parts=[types.Part(text=m.content)]
            )
            for m in turns
        ]

        response = await self.client.aio.models.generate_content(
            model=model_id,
            contents=contents,
            config=generation_config
        )

        usage = response.usage_metadata
        return ChatCompletion(
            content=response.text,
            model=model_id,
            prompt_tokens=(usage.prompt_token_count or 0) if usage else 0,
            completion_tokens=(usage.candidates_token_count or 0) if usage else 0
        )
