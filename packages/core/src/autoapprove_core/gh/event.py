"""Helpers for the webhook payload GitHub Actions writes to GITHUB_EVENT_PATH."""

from __future__ import annotations

import json
from pathlib import Path


def load_event(path: str) -> dict:
    with open(Path(path)) as f:
        return json.load(f)


def pull_request_number(payload: dict) -> int | None:
    """Return the PR number: top-level ``number``, else ``pull_request.number``."""
    number = payload.get("number")
    if number is None:
        number = (payload.get("pull_request") or {}).get("number")
    return int(number) if number is not None else None


def repository_name(payload: dict) -> str | None:
    return (payload.get("repository") or {}).get("full_name")
