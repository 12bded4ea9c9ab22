"""Tests for the two-agent conversation loop."""

import pytest

from src.conversation import Conversation, TERMINATION_TOKEN, is_termination_message
from src.models.schemas import Message, Role


class TestIsTerminationMessage:

    def test_exact_token(self):
        assert is_termination_message(Message(sender="a", content="TERMINATE"))

    def test_case_insensitive_substring(self):
        assert is_termination_message(Message(sender="a", content="Looks great. terminate"))
        assert is_termination_message(Message(sender="a", content="[Terminate]"))

    def test_no_token(self):
        assert not is_termination_message(Message(sender="a", content="Add more numbers on ROI."))

    def test_empty_and_missing(self):
        assert not is_termination_message(None)
        assert not is_termination_message(Message(sender="a", content=None))

    def test_custom_token(self):
        message = Message(sender="a", content="we are DONE here")
        assert is_termination_message(message, token="done")
        assert not is_termination_message(message)

    def test_default_token(self):
        assert TERMINATION_TOKEN == "TERMINATE"


class TestConversation:

    def test_rejects_non_positive_round_cap(self, scripted_agent_factory):
        critic = scripted_agent_factory("Critic", [])
        writer = scripted_agent_factory("Writer", [])
        with pytest.raises(ValueError):
            Conversation(critic, writer, max_rounds=0)

    def test_rejects_agents_with_same_name(self, scripted_agent_factory):
        with pytest.raises(ValueError):
            Conversation(scripted_agent_factory("Same", []), scripted_agent_factory("Same", []))

    def test_rejects_empty_termination_token(self, scripted_agent_factory):
        critic = scripted_agent_factory("Critic", [])
        writer = scripted_agent_factory("Writer", [])
        with pytest.raises(ValueError, match="termination_token"):
            Conversation(critic, writer, termination_token="")

    @pytest.mark.asyncio
    async def test_send_opens_with_receiver_and_alternates(self, scripted_agent_factory):
        critic = scripted_agent_factory("Critic", ["feedback 1", "feedback 2"])
        writer = scripted_agent_factory("Writer", ["draft 1", "draft 2", "draft 3"])

        result = await Conversation(critic, writer, max_rounds=5, verbose=False).send("Write it")

        assert [m.sender for m in result.messages] == [
            "Critic", "Writer", "Critic", "Writer", "Critic", "Writer"
        ]
        assert [m.content for m in result.messages[1:]] == [
            "draft 1", "feedback 1", "draft 2", "feedback 2", "draft 3"
        ]
        assert result.messages[0].role == Role.USER
        assert result.rounds == 5
        assert not result.terminated

    @pytest.mark.asyncio
    async def test_stops_at_termination_token(self, scripted_agent_factory):
        critic = scripted_agent_factory("Critic", ["more detail please", "TERMINATE"])
        writer = scripted_agent_factory("Writer", ["draft 1", "draft 2", "draft 3"])

        result = await Conversation(critic, writer, max_rounds=16, verbose=False).send("Write it")

        assert result.terminated
        assert result.rounds == 4
        assert result.termination_message.content == "TERMINATE"
        assert result.last_message_from("Writer").content == "draft 2"
        # The writer is never asked for a third draft
        assert writer.replies == ["draft 3"]

    @pytest.mark.asyncio
    async def test_writer_can_end_conversation(self, scripted_agent_factory):
        critic = scripted_agent_factory("Critic", [])
        writer = scripted_agent_factory("Writer", ["nothing to add, terminate"])

        result = await Conversation(critic, writer, max_rounds=3, verbose=False).send("Write it")

        assert result.terminated
        assert result.rounds == 1
        assert critic.seen == []

    @pytest.mark.asyncio
    async def test_round_cap_is_hard(self, scripted_agent_factory):
        critic = scripted_agent_factory("Critic", ["a", "b", "c"])
        writer = scripted_agent_factory("Writer", ["1", "2", "3"])

        result = await Conversation(critic, writer, max_rounds=3, verbose=False).send("go")

        assert result.rounds == 3
        assert len(result.messages) == 4
        assert result.last_message.sender == "Writer"

    @pytest.mark.asyncio
    async def test_empty_history_starts_with_receiver(self, scripted_agent_factory):
        critic = scripted_agent_factory("Critic", [])
        writer = scripted_agent_factory("Writer", ["hello"])

        result = await Conversation(critic, writer, max_rounds=1, verbose=False).run()

        assert [m.sender for m in result.messages] == ["Writer"]
        assert writer.seen == [[]]

    @pytest.mark.asyncio
    async def test_history_from_receiver_hands_turn_to_sender(self, scripted_agent_factory):
        critic = scripted_agent_factory("Critic", ["feedback"])
        writer = scripted_agent_factory("Writer", [])
        history = [Message(sender="Writer", content="draft")]

        result = await Conversation(critic, writer, max_rounds=1, verbose=False).run(history)

        assert result.last_message.sender == "Critic"
        assert len(history) == 1

    @pytest.mark.asyncio
    async def test_each_speaker_sees_full_history(self, scripted_agent_factory):
        critic = scripted_agent_factory("Critic", ["feedback"])
        writer = scripted_agent_factory("Writer", ["draft 1", "draft 2"])

        await Conversation(critic, writer, max_rounds=3, verbose=False).send("task")

        assert [m.content for m in writer.seen[1]] == ["task", "draft 1", "feedback"]
        assert [m.content for m in critic.seen[0]] == ["task", "draft 1"]

    @pytest.mark.asyncio
    async def test_logs_rounds_when_verbose(self, scripted_agent_factory, capsys):
        critic = scripted_agent_factory("Critic", [])
        writer = scripted_agent_factory("Writer", ["draft"])

        await Conversation(critic, writer, max_rounds=1, verbose=True).send("task")

        out = capsys.readouterr().out
        assert "[Conversation] Round 1: Assistant Writer >" in out
        assert "Reached the maximum of 1 rounds" in out
