"""Pytest configuration and fixtures."""

from typing import Callable, List, Optional

import pytest

from config.config import ModelConfig
from src.agents.agent import ConversableAgent
from src.llm_clients.base_client import BaseLLMClient
from src.models.schemas import ChatCompletion, ChatMessage, Message, Role


class FakeLLMClient(BaseLLMClient):
    """Client that answers from a script or a responder function and records every request."""

    def __init__(
        self,
        replies: Optional[List[Optional[str]]] = None,
        responder: Optional[Callable[[List[ChatMessage]], str]] = None,
        model_id: str = "fake-model"
    ):
        super().__init__(ModelConfig(name="Fake", api_key="test-key", model_id=model_id))
        self.replies = list(replies or [])
        self.responder = responder
        self.calls = []

    async def chat(
        self,
        messages: List[ChatMessage],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        model_id: Optional[str] = None
    ) -> ChatCompletion:
        self.calls.append({
            "messages": list(messages),
            "temperature": temperature,
            "max_tokens": max_tokens,
            "model_id": model_id
        })
        if self.responder is not None:
            content = self.responder(messages)
        else:
            content = self.replies.pop(0)
        return ChatCompletion(content=content, model=model_id, prompt_tokens=10, completion_tokens=5)


class ScriptedAgent(ConversableAgent):
    """Agent that returns canned replies and keeps the histories it was shown."""

    def __init__(self, name: str, replies: List[str]):
        self._name = name
        self.replies = list(replies)
        self.seen: List[List[Message]] = []

    @property
    def name(self) -> str:
        return self._name

    async def generate_reply(self, history: List[Message]) -> Message:
        self.seen.append(list(history))
        return Message(sender=self._name, role=Role.ASSISTANT, content=self.replies.pop(0))


@pytest.fixture
def fake_client_factory():
    """Build FakeLLMClient instances."""
    return FakeLLMClient


@pytest.fixture
def scripted_agent_factory():
    """Build ScriptedAgent instances."""
    return ScriptedAgent
