"""
Nested multi-critic review.
Wraps a critic so that every new piece of work from the writer is
reviewed by a panel of reviewers and aggregated by a meta reviewer
before it is returned to the writer.
"""

from typing import List

from src.agents.agent import ConversableAgent
from src.conversation import Conversation
from src.models.schemas import Message, Role

REVIEW_PROMPT_TEMPLATE = """Review the following content.

{content}"""

AGGREGATION_PROMPT = "Aggregate feedback from all reviewers and give final suggestions on the writing."


class NestedMultiCriticAgent(ConversableAgent):
    """Critic that delegates writer drafts to reviewers and a meta reviewer."""

    def __init__(
        self,
        critic: ConversableAgent,
        writer_name: str,
        reviewers: List[ConversableAgent],
        meta_reviewer: ConversableAgent,
        verbose: bool = True
    ):
        """
        Initialize the nested critic.

        Args:
            critic: The critic being wrapped; answers anything not from the writer
            writer_name: Name of the agent whose messages trigger a review
            reviewers: Reviewers, consulted one after another in this order
            meta_reviewer: Agent that aggregates the reviews
            verbose: Whether to print progress messages
        """
        if not reviewers:
            raise ValueError("At least one reviewer is required")

        self.critic = critic
        self.writer_name = writer_name
        self.reviewers = list(reviewers)
        self.meta_reviewer = meta_reviewer
        self.verbose = verbose

    @property
    def name(self) -> str:
        return self.critic.name

    def _log(self, message: str):
        """Print message if verbose mode is enabled."""
        if self.verbose:
            print(f"[MultiCritic] {message}")

    async def generate_reply(self, history: List[Message]) -> Message:
        if not history or history[-1].sender != self.writer_name:
            return await self.critic.generate_reply(history)

        work = history[-1]
        reviews = await self.collect_reviews(work)
        return await self.aggregate(reviews)

    async def collect_reviews(self, work: Message) -> List[Message]:
        """
        Ask every reviewer for one review of the work, sequentially.

        Args:
            work: The writer's message to review

        Returns:
            Reviewer replies in reviewer order
        """
        prompt = REVIEW_PROMPT_TEMPLATE.format(content=work.content)
        reviews = []

        for reviewer in self.reviewers:
            self._log(f"Requesting review from {reviewer.name}")
            conversation = Conversation(
                sender=self.critic,
                receiver=reviewer,
                max_rounds=1,
                verbose=False
            )
            result = await conversation.send(prompt)
            reviews.extend(result.messages[1:])

        return reviews

    async def aggregate(self, reviews: List[Message]) -> Message:
        """
        Have the meta reviewer aggregate the reviews into one reply.

        Args:
            reviews: Reviewer replies

        Returns:
            The aggregate, sent under the critic's name
        """
        self._log(f"Aggregating {len(reviews)} reviews with {self.meta_reviewer.name}")
        conversation = Conversation(
            sender=self.critic,
            receiver=self.meta_reviewer,
            max_rounds=1,
            verbose=False
        )
        request = Message(sender=self.critic.name, role=Role.USER, content=AGGREGATION_PROMPT)
        result = await conversation.run(reviews + [request])

        meta_review = result.last_message
        return meta_review.model_copy(update={"sender": self.critic.name})
