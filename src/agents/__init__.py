"""Chat agents and the pieces they share."""

from .agent import (
    Agent,
    ConversableAgent,
    TokenUsageTracker,
    format_message
)

__all__ = [
    "Agent",
    "ConversableAgent",
    "TokenUsageTracker",
    "format_message"
]
