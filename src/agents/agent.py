"""
Chat agents: a fixed configuration (system prompt plus model parameters)
bound to an LLM client that turns a conversation history into one reply.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from config.config import SYSTEM_CONFIG
from src.llm_clients.base_client import BaseLLMClient
from src.models.schemas import (
    AgentConfig,
    ChatCompletion,
    ChatMessage,
    Message,
    Role,
    TokenUsage
)


def format_message(message: Message) -> str:
    """Render a message for the console."""
    separator = "-" * 60
    return f"Message from {message.sender}\n{separator}\n{message.content}\n{separator}"


class TokenUsageTracker:
    """Accumulates token usage per agent across all calls."""

    def __init__(self):
        self._usage: Dict[str, TokenUsage] = {}

    def record(self, agent_name: str, completion: ChatCompletion):
        usage = self._usage.setdefault(agent_name, TokenUsage(agent_name=agent_name))
        usage.calls += 1
        usage.prompt_tokens += completion.prompt_tokens
        usage.completion_tokens += completion.completion_tokens

    def get(self, agent_name: str) -> TokenUsage:
        return self._usage.get(agent_name, TokenUsage(agent_name=agent_name))

    def usages(self) -> List[TokenUsage]:
        return list(self._usage.values())

    @property
    def total_tokens(self) -> int:
        return sum(u.total_tokens for u in self._usage.values())

    def summary(self) -> str:
        """Render a per-agent usage table."""
        lines = ["Token usage:"]
        for usage in self._usage.values():
            lines.append(
                f"  {usage.agent_name}: {usage.calls} calls, "
                f"{usage.prompt_tokens} prompt + {usage.completion_tokens} completion "
                f"= {usage.total_tokens} tokens"
            )
        lines.append(f"  Total: {self.total_tokens} tokens")
        return "\n".join(lines)


class ConversableAgent(ABC):
    """Anything that can take part in a conversation loop."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    async def generate_reply(self, history: List[Message]) -> Message:
        """
        Produce the next message given the conversation so far.

        Args:
            history: Messages in call order

        Returns:
            The reply, sent by this agent
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"


class Agent(ConversableAgent):
    """An LLM-backed agent with a fixed system prompt and model parameters."""

    def __init__(
        self,
        config: AgentConfig,
        client: BaseLLMClient,
        verbose: bool = True,
        usage_tracker: Optional[TokenUsageTracker] = None
    ):
        """
        Initialize the agent.

        Args:
            config: Immutable agent configuration
            client: Client used for every reply
            verbose: Whether to print each reply as it is produced
            usage_tracker: Optional shared token usage tracker
        """
        self.config = config
        self.client = client
        self.verbose = verbose
        self.usage_tracker = usage_tracker

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def system_prompt(self) -> str:
        return self.config.system_prompt

    def build_messages(self, history: List[Message]) -> List[ChatMessage]:
        """
        Translate the shared history into this agent's point of view.

        The agent's own messages become assistant turns; everything else,
        whoever sent it, is a user turn.
        """
        messages = [ChatMessage(role=Role.SYSTEM, content=self.config.system_prompt)]

        for message in history:
            if message.role == Role.SYSTEM:
                role = Role.SYSTEM
            elif message.sender == self.name:
                role = Role.ASSISTANT
            else:
                role = Role.USER
            messages.append(ChatMessage(role=role, content=message.content))

        return messages

    async def generate_reply(self, history: List[Message]) -> Message:
        messages = self.build_messages(history)
        if SYSTEM_CONFIG.debug:
            print(f"[Agent] {self.name}: sending {len(messages)} messages to {self.config.model_id}")

        completion = await self.client.chat(
            messages=messages,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
            model_id=self.config.model_id
        )

        if self.usage_tracker is not None:
            self.usage_tracker.record(self.name, completion)

        reply = Message(sender=self.name, role=Role.ASSISTANT, content=completion.content)

        if self.verbose:
            print(format_message(reply))

        return reply

