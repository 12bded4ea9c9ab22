"""
Two-agent conversation loop.
Agents take turns replying until one reply carries the termination
token or the round cap is reached.
"""

from typing import List, Optional

from config.config import SYSTEM_CONFIG
from src.agents.agent import ConversableAgent
from src.models.schemas import ConversationResult, Message, Role

TERMINATION_TOKEN = SYSTEM_CONFIG.termination_token


def is_termination_message(message: Optional[Message], token: str = TERMINATION_TOKEN) -> bool:
    """Case-insensitive check for the termination token in a message."""
    if message is None or not message.content:
        return False
    return token.lower() in message.content.lower()


class Conversation:
    """
    Round-robin conversation between a sender and a receiver.

    The agent that did not write the last message in the history speaks
    next, so a conversation seeded with a message from the sender opens
    with the receiver. Each round produces exactly one reply.
    """

    def __init__(
        self,
        sender: ConversableAgent,
        receiver: ConversableAgent,
        max_rounds: int = 10,
        termination_token: str = TERMINATION_TOKEN,
        verbose: bool = True
    ):
        """
        Initialize the conversation.

        Args:
            sender: Agent that opens the conversation
            receiver: Agent that answers first
            max_rounds: Maximum number of replies to generate
            termination_token: Token that ends the conversation
            verbose: Whether to print progress messages
        """
        if max_rounds < 1:
            raise ValueError(f"max_rounds must be at least 1, got {max_rounds}")
        if not termination_token:
            raise ValueError("termination_token must not be empty")
        if sender.name == receiver.name:
            raise ValueError(f"Sender and receiver must have different names, both are '{sender.name}'")

        self.sender = sender
        self.receiver = receiver
        self.max_rounds = max_rounds
        self.termination_token = termination_token
        self.verbose = verbose

    def _log(self, message: str):
        """Print message if verbose mode is enabled."""
        if self.verbose:
            print(f"[Conversation] {message}")

    def next_speaker(self, history: List[Message]) -> ConversableAgent:
        """Pick the agent that speaks after the last message in the history."""
        if history and history[-1].sender == self.receiver.name:
            return self.sender
        return self.receiver

    async def run(self, history: Optional[List[Message]] = None) -> ConversationResult:
        """
        Run the loop on top of an existing history.

        Args:
            history: Messages exchanged so far; not modified

        Returns:
            ConversationResult with the initial history followed by the replies
        """
        messages = list(history or [])
        rounds = 0
        terminated = False

        while rounds < self.max_rounds:
            speaker = self.next_speaker(messages)
            self._log(f"Round {rounds + 1}: Assistant {speaker.name} >")

            reply = await speaker.generate_reply(messages)
            messages.append(reply)
            rounds += 1

            if is_termination_message(reply, self.termination_token):
                self._log(f"{speaker.name} ended the conversation after {rounds} rounds")
                terminated = True
                break

        if not terminated:
            self._log(f"Reached the maximum of {self.max_rounds} rounds")

        return ConversationResult(messages=messages, rounds=rounds, terminated=terminated)

    async def send(self, message: str) -> ConversationResult:
        """
        Start a conversation with one message from the sender to the receiver.

        Args:
            message: Opening message text

        Returns:
            ConversationResult including the opening message
        """
        opening = Message(sender=self.sender.name, role=Role.USER, content=message)
        return await self.run([opening])
