"""
Abstract base class for LLM clients.
Provides a unified chat interface over different hosted providers.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from config.config import ModelConfig
from src.models.schemas import ChatCompletion, ChatMessage, Role

# User turn placed before a dialogue that opens with the agent's own message
CONVERSATION_OPENER = "Continue the conversation."


class BaseLLMClient(ABC):
    """Abstract base class for chat-completion API clients."""

    def __init__(self, config: ModelConfig):
        """
        Initialize the LLM client.

        Args:
            config: Model configuration including API key and settings
        """
        self.config = config
        self.name = config.name
        self.model_id = config.model_id

    @abstractmethod
    async def chat(
        self,
        messages: List[ChatMessage],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        model_id: Optional[str] = None
    ) -> ChatCompletion:
        """
        Send a list of role-tagged messages and return one reply.

        Args:
            messages: Conversation so far, system message first if any
            temperature: Override default temperature
            max_tokens: Override default max tokens
            model_id: Override the configured model

        Returns:
            The reply with token usage
        """
        pass

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> str:
        """
        Generate a text response to a single prompt.

        Args:
            prompt: The user prompt
            system_prompt: Optional system prompt to set context
            temperature: Override default temperature
            max_tokens: Override default max tokens

        Returns:
            The generated text response
        """
        messages = []
        if system_prompt:
            messages.append(ChatMessage(role=Role.SYSTEM, content=system_prompt))
        messages.append(ChatMessage(role=Role.USER, content=prompt))

        completion = await self.chat(
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens
        )
        return completion.content

    def _resolve(
        self,
        temperature: Optional[float],
        max_tokens: Optional[int],
        model_id: Optional[str]
    ) -> tuple:
        """Fill unset request parameters from the model configuration."""
        return (
            temperature if temperature is not None else self.config.temperature,
            max_tokens or self.config.max_tokens,
            model_id or self.model_id
        )

    @staticmethod
    def _split_system(messages: List[ChatMessage]) -> Tuple[str, List[ChatMessage]]:
        """
        Separate system text from the dialogue turns.

        Providers that take the system prompt as a separate parameter and
        require strictly alternating turns starting with the user get one
        merged system string and merged consecutive same-role turns.

        Args:
            messages: Role-tagged conversation

        Returns:
            Tuple of (system text, alternating turns)
        """
        system_parts = [m.content for m in messages if m.role == Role.SYSTEM]
        turns: List[ChatMessage] = []

        for message in messages:
            if message.role == Role.SYSTEM:
                continue
            if turns and turns[-1].role == message.role:
                turns[-1] = ChatMessage(
                    role=message.role,
                    content=f"{turns[-1].content}\n\n{message.content}"
                )
            else:
                turns.append(message)

        if turns and turns[0].role == Role.ASSISTANT:
            turns.insert(0, ChatMessage(role=Role.USER, content=CONVERSATION_OPENER))

        return "\n\n".join(system_parts), turns

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name}, model={self.model_id})"
