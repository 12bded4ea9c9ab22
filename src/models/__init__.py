"""Pydantic models for agents, messages and conversation results."""

from .schemas import (
    Role,
    AgentConfig,
    Message,
    ChatMessage,
    ChatCompletion,
    TokenUsage,
    ConversationResult,
    WorkflowResult
)

__all__ = [
    "Role",
    "AgentConfig",
    "Message",
    "ChatMessage",
    "ChatCompletion",
    "TokenUsage",
    "ConversationResult",
    "WorkflowResult"
]
