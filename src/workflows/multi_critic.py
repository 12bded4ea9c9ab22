"""
Multi-critic demo: reflection with nested reviewers.
A writer drafts a conference article; each draft is reviewed by SEO,
legal, ethics, fact and style reviewers and the meta reviewer's
aggregate goes back to the writer as the critic's feedback.
"""

from typing import Optional

from config.config import SYSTEM_CONFIG
from src.agents.multi_critic import NestedMultiCriticAgent
from src.conversation import Conversation
from src.llm_clients.base_client import BaseLLMClient
from src.models.schemas import WorkflowResult
from src.scenarios import ARTICLE_TASK, conference_description
from src.workflows.base import BaseWorkflow


class MultiCriticWorkflow(BaseWorkflow):
    """Writer/critic loop where the critic is backed by a review panel."""

    NAME = "MultiCritic"
    OUTPUT_FILE = "Conference_Article.txt"

    WRITER_NAME = "Writer"
    CRITIC_NAME = "Critic"

    WRITER_PROMPT = """You are a writer. You write engaging and concise articles (with title) on given topics.
You must polish your writing based on the feedback you receive and provide a refined version.
Only return your final work without additional comments."""

    CRITIC_PROMPT_TEMPLATE = """You are a critic. You review the work of the writer and provide constructive feedback to help improve the quality of the content.
If the work is already solid and convincing, like 80-90% perfect, you can respond with '{token}' only.
If you provide ANY feedback, DO NOT, I repeat, DO NOT respond or add '{token}' in your feedback.
After having replied 4 times, respond with '{token}' to end the conversation.
AGAIN DO NOT WRITE ANY PART OF THE work. ONLY PROVIDE FEEDBACK.
IF THE work IS SOLID, RESPOND WITH '{token}'.
RESPOND WITH {token} AFTER 4 REPLIES."""

    SEO_PROMPT = """You are an SEO reviewer, known for your ability to optimize content for search engines, ensuring that it ranks well and attracts organic traffic.
Make sure your suggestion is concise (within 3 bullet points), concrete and to the point.
Begin the review by stating your role."""

    LEGAL_PROMPT = """You are a legal reviewer, known for your ability to ensure that content is legally compliant and free from any potential legal issues.
Make sure your suggestion is concise (within 3 bullet points), concrete and to the point.
Begin the review by stating your role.
Also be aware of data privacy and GDPR compliance which needs to be respected, so in doubt suggest the removal of PII information.
Assume that the speakers have agreed to share their name and title, so there is no issue with sharing that in the article."""

    ETHICS_PROMPT = """You are an ethics reviewer, known for your ability to ensure that content is ethically sound and free from any potential ethical issues.
Make sure your suggestion is concise (within 3 bullet points), concrete and to the point.
Begin the review by stating your role."""

    FACT_CHECKER_PROMPT_TEMPLATE = """You are a FactChecker. Your job is to ensure that all facts mentioned in the article are accurate and derived from the provided source material.
You will avoid any hallucinations and that all the facts are cross-checked with the source material.

Cross-check the content against the following source:

{source}

Make sure no invented information is included, and suggest corrections if any discrepancies are found."""

    STYLE_CHECKER_PROMPT = """You are a Style Checker. Your task is to ensure that the article is written in a proper style.
Check that the writing style is positive, engaging, motivational, original, and funny.
The phrases should not be too complex, and the tone should be friendly, casual, yet polite.
Provide suggestions to improve the style if necessary.
Provide ONLY Suggestions, do not rewrite the content or write any part of the content in the style suggested, this is the work of the writer."""

    META_REVIEWER_PROMPT = """You are a meta reviewer, you aggregate and review the work of other reviewers and give a final suggestion on the content."""

    def __init__(
        self,
        client: BaseLLMClient,
        max_rounds: int = SYSTEM_CONFIG.multi_critic_max_rounds,
        output_dir: Optional[str] = None,
        verbose: bool = True,
        termination_token: str = SYSTEM_CONFIG.termination_token,
        task: str = ARTICLE_TASK
    ):
        super().__init__(client, max_rounds, output_dir, verbose)
        self.termination_token = termination_token
        self.task = task

        self.writer = self.create_agent(self.WRITER_NAME, self.WRITER_PROMPT)
        self.critic = self.create_agent(
            self.CRITIC_NAME,
            self.CRITIC_PROMPT_TEMPLATE.format(token=termination_token)
        )

        # Consulted in this order for every draft
        self.reviewers = [
            self.create_agent("SEO_Reviewer", self.SEO_PROMPT),
            self.create_agent("Legal_Reviewer", self.LEGAL_PROMPT),
            self.create_agent("Ethics_Reviewer", self.ETHICS_PROMPT),
            self.create_agent(
                "FactChecker",
                self.FACT_CHECKER_PROMPT_TEMPLATE.format(source=conference_description())
            ),
            self.create_agent("StyleChecker", self.STYLE_CHECKER_PROMPT),
        ]
        self.meta_reviewer = self.create_agent("Meta_Reviewer", self.META_REVIEWER_PROMPT)

        self.nested_critic = NestedMultiCriticAgent(
            critic=self.critic,
            writer_name=self.writer.name,
            reviewers=self.reviewers,
            meta_reviewer=self.meta_reviewer,
            verbose=verbose
        )

    async def run(self) -> WorkflowResult:
        """
        Send the article task to the writer and iterate with the review panel.

        Returns:
            WorkflowResult with the conversation and the saved article
        """
        self._log(f"Task: {self.task}")

        conversation = Conversation(
            sender=self.nested_critic,
            receiver=self.writer,
            max_rounds=self.max_rounds,
            termination_token=self.termination_token,
            verbose=self.verbose
        )
        result = await conversation.send(self.task)

        last = result.last_message
        self._log(f"Final message from {last.sender}")

        final_article = result.last_message_from(self.writer.name)
        output_path = self.save_final_draft(final_article)
        return self.build_result(result, final_article, output_path)
