"""
Shared plumbing for the demo workflows.
"""

from pathlib import Path
from typing import Optional

from config.config import SYSTEM_CONFIG
from src.agents.agent import Agent, TokenUsageTracker
from src.llm_clients.base_client import BaseLLMClient
from src.models.schemas import AgentConfig, ConversationResult, Message, WorkflowResult


class BaseWorkflow:
    """Owns the client, the token tracker and the output location of a demo."""

    NAME = "workflow"
    OUTPUT_FILE: Optional[str] = None

    def __init__(
        self,
        client: BaseLLMClient,
        max_rounds: int,
        output_dir: Optional[str] = None,
        verbose: bool = True
    ):
        """
        Initialize the workflow.

        Args:
            client: Client shared by every agent of the demo
            max_rounds: Round cap of the top-level conversation
            output_dir: Directory for the final draft, defaults to SYSTEM_CONFIG.output_dir
            verbose: Whether to print messages and progress
        """
        if max_rounds < 1:
            raise ValueError(f"max_rounds must be at least 1, got {max_rounds}")

        self.client = client
        self.max_rounds = max_rounds
        self.output_dir = Path(output_dir or SYSTEM_CONFIG.output_dir)
        self.verbose = verbose
        self.usage_tracker = TokenUsageTracker()

    def _log(self, message: str):
        """Print message if verbose mode is enabled."""
        if self.verbose:
            print(f"[{self.NAME}] {message}")

    def create_agent(
        self,
        name: str,
        system_prompt: str,
        temperature: float = 0.7,
        max_tokens: int = 1024
    ) -> Agent:
        """Build an agent on the shared client and usage tracker."""
        config = AgentConfig(
            name=name,
            system_prompt=system_prompt,
            model_id=self.client.model_id,
            temperature=temperature,
            max_tokens=max_tokens
        )
        return Agent(config, self.client, verbose=self.verbose, usage_tracker=self.usage_tracker)

    def save_final_draft(self, message: Optional[Message]) -> Optional[Path]:
        """
        Write the final draft to the workflow's output file.

        Args:
            message: The draft; nothing is written when None

        Returns:
            Path of the written file, or None
        """
        if message is None or self.OUTPUT_FILE is None:
            return None

        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / self.OUTPUT_FILE
        path.write_text(message.content, encoding="utf-8")
        self._log(f"Final draft saved to {path}")
        return path

    def build_result(
        self,
        conversation: ConversationResult,
        final_message: Optional[Message],
        output_path: Optional[Path]
    ) -> WorkflowResult:
        if self.verbose:
            print(self.usage_tracker.summary())

        return WorkflowResult(
            workflow=self.NAME,
            conversation=conversation,
            final_message=final_message,
            output_path=str(output_path) if output_path else None,
            token_usage=self.usage_tracker.usages()
        )
