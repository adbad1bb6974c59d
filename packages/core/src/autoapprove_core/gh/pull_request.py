from __future__ import annotations

import logging

from github import Github

logger = logging.getLogger(__name__)


def get_repo(repo_name: str, token: str):
    return Github(token).get_repo(repo_name)


def get_pull(repo, pr_number: int):
    return repo.get_pull(pr_number)


def approve_pull_request(token: str, repo_name: str, pr_number: int) -> None:
    """Submit an APPROVE review with no body on ``repo_name#pr_number``.

    GithubException (permissions, already approved, not found) and network
    errors propagate to the caller; nothing is retried.
    """
    pr = get_pull(get_repo(repo_name, token=token), pr_number)
    pr.create_review(event="APPROVE")
    logger.debug("Approved %s#%d", repo_name, pr_number)
