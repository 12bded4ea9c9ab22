"""
Argumentary demo: writer/critic reflection.
A writer drafts a persuasive argumentary and a critic playing the team
lead reviews it until the critic is satisfied or the round cap is hit.
"""

from typing import Optional

from config.config import SYSTEM_CONFIG
from src.conversation import Conversation
from src.llm_clients.base_client import BaseLLMClient
from src.models.schemas import Message, Role, WorkflowResult
from src.scenarios import (
    COMPANY_DESCRIPTION,
    CONFERENCE_SUMMARY,
    TEAM_LEAD_PROFILE,
    WORKER_PROFILE
)
from src.workflows.base import BaseWorkflow


class ArgumentaryWorkflow(BaseWorkflow):
    """Writer/critic loop producing an argumentary cheat sheet."""

    NAME = "Argumentary"
    OUTPUT_FILE = "Argumentary_CheatSheet.txt"

    WRITER_NAME = "ArgumentaryWriter"
    CRITIC_NAME = "CriticTeamLead"

    TITLE_BANNER = r"""
                           _____            __ _
    /\                    / ____|          / _| |
   /  \   _ __ __ _ _   _| |     _ __ __ _| |_| |_
  / /\ \ | '__/ _` | | | | |    | '__/ _` |  _| __|
 / ____ \| | | (_| | |_| | |____| | | (_| | | | |_
/_/    \_\_|  \__, |\__,_|\_____|_|  \__,_|_|  \__|
               __/ |
              |___/
                              ArguCraft by José L. Latorre
"""

    CONTEXT_TEMPLATE = """Worker profile: {worker_profile}
Company Description: {company_description}
Team Lead profile: {team_lead_profile}
Conference Summary: {conference_summary}"""

    WRITER_PROMPT_TEMPLATE = """Your name is ArgumentaryWriter, a Persuasiveness Expert.
Your task is to create a convincing argumentary document, to have a spoken in-person conversation, from Sheila's point of view to persuade her Team Lead, John, to allow her to attend a conference.
{context}
Write the argumentary with ideas to start and lead the conversation, including at the end, a list of several possible questions from John and perfect responses to them from Sheila.
Also, take any feedback from CriticTeamLead seriously and make necessary changes to the argumentary."""

    CRITIC_PROMPT_TEMPLATE = """Your name is CriticTeamLead, an expert in understanding team dynamics and leadership perspectives.
Your task is to critique the argument written by ArgumentaryWriter from the perspective of John, Sheila's Team Lead.
{context}
Provide suggestions to improve the argumentary to make it more persuasive and complete. When the argumentary is solid, and there is no suggestion to improve it in excess, respond with '{token}'.
If the Argumentary is already solid and convincing, like 80-90% perfect, you can respond with '{token}' only.
Do not write any part of the argumentary, even for reference. Only provide feedback and suggestions if any.
If you provide ANY feedback, DO NOT, I repeat, DO NOT respond or add '{token}' in your feedback.
After having replied 6 times, respond with '{token}' to end the conversation.
AGAIN DO NOT WRITE ANY PART OF THE ARGUMENTARY. ONLY PROVIDE FEEDBACK.
IF THE ARGUMENTARY IS SOLID, RESPOND WITH '{token}'.
RESPOND WITH {token} AFTER 6 REPLIES."""

    OPENING_MESSAGE = "Please create an argumentary document for Sheila to convince John to attend the conference."

    def __init__(
        self,
        client: BaseLLMClient,
        max_rounds: int = SYSTEM_CONFIG.argumentary_max_rounds,
        output_dir: Optional[str] = None,
        verbose: bool = True,
        termination_token: str = SYSTEM_CONFIG.termination_token
    ):
        super().__init__(client, max_rounds, output_dir, verbose)
        self.termination_token = termination_token

        context = self.CONTEXT_TEMPLATE.format(
            worker_profile=WORKER_PROFILE,
            company_description=COMPANY_DESCRIPTION,
            team_lead_profile=TEAM_LEAD_PROFILE,
            conference_summary=CONFERENCE_SUMMARY
        )

        self.writer = self.create_agent(
            name=self.WRITER_NAME,
            system_prompt=self.WRITER_PROMPT_TEMPLATE.format(context=context),
            temperature=0.6,
            max_tokens=1200
        )
        self.critic = self.create_agent(
            name=self.CRITIC_NAME,
            system_prompt=self.CRITIC_PROMPT_TEMPLATE.format(context=context, token=termination_token),
            temperature=0.3,
            max_tokens=1200
        )

    def print_title(self):
        if self.verbose:
            print(self.TITLE_BANNER)

    async def run(self) -> WorkflowResult:
        """
        Run the writer/critic loop and save the final argumentary.

        Returns:
            WorkflowResult with the conversation and the saved draft
        """
        self.print_title()

        conversation = Conversation(
            sender=self.critic,
            receiver=self.writer,
            max_rounds=self.max_rounds,
            termination_token=self.termination_token,
            verbose=self.verbose
        )
        history = [Message(sender=self.critic.name, role=Role.USER, content=self.OPENING_MESSAGE)]

        result = await conversation.run(history)

        # Latest draft before the critic's sign-off, or the latest one when the cap was hit
        final_draft = result.last_message_from(self.writer.name)
        if final_draft is None:
            self._log("The writer produced no draft")

        output_path = self.save_final_draft(final_draft)
        return self.build_result(result, final_draft, output_path)
