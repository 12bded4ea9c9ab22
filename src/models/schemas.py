"""
Pydantic models for agents, chat messages and conversation results.
"""

from typing import List, Optional, Dict
from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum


class Role(str, Enum):
    """Roles a chat message can carry."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


# ============== Agent Models ==============

class AgentConfig(BaseModel):
    """Fixed configuration of an agent. Immutable once built."""
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    name: str = Field(..., min_length=1, description="Agent name, used as message sender")
    system_prompt: str = Field(..., description="System prompt sent before the history")
    model_id: str = Field(..., description="Model name at the hosted API")
    temperature: float = Field(default=0.7, ge=0.0, le=2.0, description="Sampling temperature")
    max_tokens: int = Field(default=1024, gt=0, description="Token limit for one reply")


# ============== Message Models ==============

class Message(BaseModel):
    """A message in a conversation history."""
    sender: str = Field(..., description="Name of the agent that produced the message")
    role: Role = Field(default=Role.ASSISTANT, description="Role of the message")
    content: str = Field(default="", description="Text content")

    @field_validator("content", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value


class ChatMessage(BaseModel):
    """A role-tagged message as sent to a chat-completion API."""
    role: Role
    content: str


class ChatCompletion(BaseModel):
    """One reply from a chat-completion API."""
    content: str = Field(default="", description="Reply text")
    model: Optional[str] = Field(default=None, description="Model that produced the reply")
    prompt_tokens: int = Field(default=0, ge=0, description="Tokens consumed by the request")
    completion_tokens: int = Field(default=0, ge=0, description="Tokens generated in the reply")

    @field_validator("content", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value


class TokenUsage(BaseModel):
    """Token usage accumulated for one agent."""
    agent_name: str
    calls: int = 0
    prompt_tokens: int = 0
    completion_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens


# ============== Conversation Models ==============

class ConversationResult(BaseModel):
    """Outcome of a conversation loop."""
    messages: List[Message] = Field(default_factory=list, description="Full history in call order")
    rounds: int = Field(default=0, ge=0, description="Number of replies generated")
    terminated: bool = Field(default=False, description="Whether the last reply carried the sentinel token")

    @property
    def last_message(self) -> Optional[Message]:
        return self.messages[-1] if self.messages else None

    @property
    def termination_message(self) -> Optional[Message]:
        # A sentinel always ends the loop, so it can only be the last reply
        return self.last_message if self.terminated else None

    def last_message_from(self, sender: str, include_termination: bool = False) -> Optional[Message]:
        """
        Find the most recent message from a sender.

        Args:
            sender: Agent name to look for
            include_termination: Whether the terminating reply may be returned

        Returns:
            The message, or None when the sender never spoke
        """
        candidates = self.messages
        if self.terminated and not include_termination:
            candidates = self.messages[:-1]
        for message in reversed(candidates):
            if message.sender == sender:
                return message
        return None

    def message_counts(self) -> Dict[str, int]:
        """Count messages per sender."""
        counts: Dict[str, int] = {}
        for message in self.messages:
            counts[message.sender] = counts.get(message.sender, 0) + 1
        return counts


class WorkflowResult(BaseModel):
    """Outcome of one demo run."""
    workflow: str = Field(..., description="Name of the demo")
    conversation: ConversationResult = Field(..., description="The top-level conversation")
    final_message: Optional[Message] = Field(default=None, description="The final draft")
    output_path: Optional[str] = Field(default=None, description="File the final draft was written to")
    token_usage: List[TokenUsage] = Field(default_factory=list, description="Per-agent token usage")
