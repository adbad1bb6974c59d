"""Normalization of action inputs and the pull-request event payload.

The raw configuration arrives as loose strings (typically GitHub Actions
inputs); the event payload is the webhook JSON the workflow runner writes to
disk. Both are folded into a single immutable DecisionRecord that the
approval policy consumes.
"""

from __future__ import annotations

from dataclasses import dataclass, field


class EventPayloadError(ValueError):
    """The event payload does not describe a pull request."""


@dataclass(frozen=True)
class RawConfig:
    token: str = field(repr=False)
    allowed_review_for: str
    review_as: str


@dataclass(frozen=True)
class DecisionRecord:
    """Everything the approval policy needs, derived from one event.

    Note the historical naming: ``source_git`` holds the pull request's *base*
    repository URL and ``target_git`` its *head* repository URL. The policy
    only compares them for equality, so the names are kept as-is.
    """

    token: str = field(repr=False)
    allowed_review_for: tuple[str, ...]
    review_as: str
    sender_login: str
    requested_reviewers: tuple[str, ...]
    source_git: str
    target_git: str


def split_identities(value: str) -> tuple[str, ...]:
    """Split a comma-separated list of logins, e.g. ``"alice, bob ,,"`` -> ``("alice", "bob")``."""
    return tuple(part.strip() for part in value.split(",") if part.strip())


def normalize(raw: RawConfig, payload: dict) -> DecisionRecord:
    """Build a DecisionRecord from the raw config and a pull_request event payload.

    Raises EventPayloadError when the payload has no pull request, or the pull
    request lacks the author, requested reviewers or base/head repositories.
    """
    pull_request = payload.get("pull_request")
    if not pull_request:
        raise EventPayloadError(
            "Event payload has no pull_request object. Run this on pull_request events only."
        )

    try:
        sender_login = pull_request["user"]["login"]
        requested = [reviewer["login"] for reviewer in pull_request["requested_reviewers"]]
        source_git = pull_request["base"]["git_url"]
        target_git = pull_request["head"]["git_url"]
    except (KeyError, TypeError) as e:
        raise EventPayloadError(f"Malformed pull_request payload: missing {e}") from e

    return DecisionRecord(
        token=raw.token,
        allowed_review_for=split_identities(raw.allowed_review_for),
        review_as=raw.review_as,
        sender_login=sender_login,
        requested_reviewers=tuple(login for login in requested if login),
        source_git=source_git,
        target_git=target_git,
    )
