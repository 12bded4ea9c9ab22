"""Tests for LLM-backed agents and token usage tracking."""

import pytest
from pydantic import ValidationError

from src.agents.agent import Agent, TokenUsageTracker, format_message
from src.models.schemas import AgentConfig, ChatCompletion, Message, Role


@pytest.fixture
def writer_config():
    return AgentConfig(
        name="Writer",
        system_prompt="You are a writer.",
        model_id="gpt-4o-mini",
        temperature=0.6,
        max_tokens=1200
    )


class TestAgentConfig:

    def test_is_immutable(self, writer_config):
        with pytest.raises(ValidationError):
            writer_config.temperature = 0.1

    def test_defaults(self):
        config = AgentConfig(name="Critic", system_prompt="Critique.", model_id="m")
        assert config.temperature == 0.7
        assert config.max_tokens == 1024

    def test_rejects_empty_name(self):
        with pytest.raises(ValidationError):
            AgentConfig(name="", system_prompt="x", model_id="m")


class TestAgent:

    def test_build_messages_uses_agent_point_of_view(self, writer_config, fake_client_factory):
        agent = Agent(writer_config, fake_client_factory())
        history = [
            Message(sender="Critic", role=Role.USER, content="Please write"),
            Message(sender="Writer", content="Draft"),
            Message(sender="Critic", content="Feedback"),
        ]

        messages = agent.build_messages(history)

        assert [m.role for m in messages] == [Role.SYSTEM, Role.USER, Role.ASSISTANT, Role.USER]
        assert messages[0].content == "You are a writer."
        assert [m.content for m in messages[1:]] == ["Please write", "Draft", "Feedback"]

    @pytest.mark.asyncio
    async def test_generate_reply_passes_model_parameters(self, writer_config, fake_client_factory):
        client = fake_client_factory(replies=["A title\n\nBody"])
        agent = Agent(writer_config, client, verbose=False)

        reply = await agent.generate_reply([Message(sender="Critic", content="Write")])

        assert reply.sender == "Writer"
        assert reply.role == Role.ASSISTANT
        assert reply.content == "A title\n\nBody"
        call = client.calls[0]
        assert call["temperature"] == 0.6
        assert call["max_tokens"] == 1200
        assert call["model_id"] == "gpt-4o-mini"

    @pytest.mark.asyncio
    async def test_missing_content_becomes_empty_string(self, writer_config, fake_client_factory):
        agent = Agent(writer_config, fake_client_factory(replies=[None]), verbose=False)

        reply = await agent.generate_reply([])

        assert reply.content == ""

    @pytest.mark.asyncio
    async def test_records_usage(self, writer_config, fake_client_factory):
        tracker = TokenUsageTracker()
        agent = Agent(writer_config, fake_client_factory(replies=["a", "b"]), verbose=False,
                      usage_tracker=tracker)

        await agent.generate_reply([])
        await agent.generate_reply([])

        usage = tracker.get("Writer")
        assert usage.calls == 2
        assert usage.prompt_tokens == 20
        assert usage.completion_tokens == 10
        assert tracker.total_tokens == 30

    @pytest.mark.asyncio
    async def test_prints_reply_when_verbose(self, writer_config, fake_client_factory, capsys):
        agent = Agent(writer_config, fake_client_factory(replies=["Hello"]), verbose=True)

        await agent.generate_reply([])

        out = capsys.readouterr().out
        assert "Message from Writer" in out
        assert "Hello" in out


class TestTokenUsageTracker:

    def test_unknown_agent_has_zero_usage(self):
        assert TokenUsageTracker().get("Nobody").total_tokens == 0

    def test_summary_lists_agents(self):
        tracker = TokenUsageTracker()
        tracker.record("Writer", ChatCompletion(content="x", prompt_tokens=100, completion_tokens=50))
        tracker.record("Critic", ChatCompletion(content="y", prompt_tokens=10, completion_tokens=5))

        summary = tracker.summary()

        assert "Writer: 1 calls, 100 prompt + 50 completion = 150 tokens" in summary
        assert "Critic" in summary
        assert "Total: 165 tokens" in summary
        assert [u.agent_name for u in tracker.usages()] == ["Writer", "Critic"]


def test_format_message():
    text = format_message(Message(sender="Critic", content="TERMINATE"))
    assert text.startswith("Message from Critic")
    assert "TERMINATE" in text
