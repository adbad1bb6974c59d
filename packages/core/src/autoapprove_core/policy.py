"""Auto-approval policy.

A pull request is approved only when all of these hold, checked in order:

  1. it comes from the same repository it targets (no forks: the token is
     only available in our own repository context)
  2. the configured reviewer identity was requested to review it
  3. its author is on the allow-list
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from autoapprove_core.inputs import DecisionRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApprovalDecision:
    approved: bool
    steps: tuple[str, ...]


def evaluate(record: DecisionRecord) -> ApprovalDecision:
    """Run the guards against the record and return the verdict with its narration."""
    steps: list[str] = []

    def _reject() -> ApprovalDecision:
        steps.append("PR will not be auto-approved.")
        return ApprovalDecision(approved=False, steps=tuple(steps))

    if record.source_git != record.target_git:
        steps.append(
            f"PR head repo {record.target_git} is not our repo {record.source_git}. "
            "We are not allowed to use the API token in that context."
        )
        return _reject()
    steps.append("PR originated from the target git repo, we can review this.")

    if record.review_as not in set(record.requested_reviewers):
        steps.append(
            f"'{record.review_as}' is not in list of requested reviewers: "
            f"{', '.join(record.requested_reviewers)}."
        )
        return _reject()
    steps.append(f"'{record.review_as}' has been requested to review.")

    if record.sender_login not in set(record.allowed_review_for):
        steps.append(
            f"User '{record.sender_login}' is not in allowed list: {', '.join(record.allowed_review_for)}."
        )
        return _reject()
    steps.append(f"User '{record.sender_login}' is in the allowed list.")

    steps.append("PR will be approved.")
    return ApprovalDecision(approved=True, steps=tuple(steps))


def should_approve(record: DecisionRecord, narrate: Optional[Callable[[str], None]] = None) -> bool:
    """Return True if the PR described by ``record`` should be auto-approved.

    Each guard outcome is passed to ``narrate`` (default: this module's logger).
    """
    decision = evaluate(record)
    emit = narrate or logger.info
    for step in decision.steps:
        emit(step)
    return decision.approved
