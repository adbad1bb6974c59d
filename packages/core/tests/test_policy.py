"""Tests for the auto-approval policy."""

from dataclasses import replace

import pytest

from autoapprove_core.inputs import DecisionRecord
from autoapprove_core.policy import evaluate, should_approve


def make_record(**overrides):
    """Scenario A: every guard passes."""
    fields = dict(
        token="tok",
        allowed_review_for=("alice", "bob"),
        review_as="bot1",
        sender_login="alice",
        requested_reviewers=("bot1",),
        source_git="repoA",
        target_git="repoA",
    )
    fields.update(overrides)
    return DecisionRecord(**fields)


class TestScenarios:
    def test_all_guards_pass(self):
        assert should_approve(make_record()) is True

    def test_fork_rejected(self):
        assert should_approve(make_record(target_git="repoB")) is False

    def test_reviewer_not_requested(self):
        assert should_approve(make_record(requested_reviewers=("bot2",))) is False

    def test_sender_not_allowed(self):
        assert should_approve(make_record(sender_login="charlie")) is False


class TestGuards:
    @pytest.mark.parametrize(
        "overrides",
        [
            {"source_git": "repoX"},
            {"requested_reviewers": ("someone-else",)},
            {"sender_login": "mallory"},
        ],
    )
    def test_flipping_any_single_guard_rejects(self, overrides):
        assert should_approve(make_record()) is True
        assert should_approve(replace(make_record(), **overrides)) is False

    def test_empty_allow_list_never_approves(self):
        assert should_approve(make_record(allowed_review_for=())) is False

    def test_empty_requested_reviewers_never_approves(self):
        assert should_approve(make_record(requested_reviewers=())) is False

    def test_identity_comparison_is_case_sensitive(self):
        assert should_approve(make_record(sender_login="Alice")) is False
        assert should_approve(make_record(review_as="Bot1")) is False

    def test_review_as_among_several_reviewers(self):
        assert should_approve(make_record(requested_reviewers=("human", "bot1"))) is True


class TestNarration:
    def test_approved_steps_cover_every_guard(self):
        decision = evaluate(make_record())
        assert decision.approved is True
        assert len(decision.steps) == 4
        assert "target git repo" in decision.steps[0]
        assert "'bot1' has been requested" in decision.steps[1]
        assert "'alice'" in decision.steps[2]
        assert decision.steps[-1] == "PR will be approved."

    def test_fork_short_circuits(self):
        decision = evaluate(make_record(target_git="repoB", requested_reviewers=()))
        assert decision.approved is False
        assert len(decision.steps) == 2
        assert "repoB" in decision.steps[0]
        assert "repoA" in decision.steps[0]
        assert decision.steps[-1] == "PR will not be auto-approved."

    def test_reviewer_message_lists_requested(self):
        decision = evaluate(make_record(requested_reviewers=("bot2", "bot3")))
        assert "bot2, bot3" in decision.steps[1]

    def test_sender_message_lists_allowed(self):
        decision = evaluate(make_record(sender_login="charlie"))
        assert "'charlie' is not in allowed list: alice, bob" in decision.steps[2]

    def test_narrate_receives_each_step(self):
        messages = []
        result = should_approve(make_record(), narrate=messages.append)
        assert result is True
        assert messages == list(evaluate(make_record()).steps)

    def test_defaults_to_logger(self, caplog):
        with caplog.at_level("INFO", logger="autoapprove_core.policy"):
            should_approve(make_record(sender_login="charlie"))
        assert "not in allowed list" in caplog.text

    def test_token_never_narrated(self):
        messages = []
        should_approve(make_record(token="super-secret"), narrate=messages.append)
        assert not any("super-secret" in m for m in messages)
