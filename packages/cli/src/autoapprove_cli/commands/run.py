"""run command: evaluate the approval policy for a pull_request event."""

from __future__ import annotations

import click
from github import GithubException
from rich.console import Console
from rich.markup import escape

from autoapprove_cli.auth import resolve_github_token
from autoapprove_core.config import load_config
from autoapprove_core.gh.event import load_event, pull_request_number, repository_name
from autoapprove_core.gh.pull_request import approve_pull_request
from autoapprove_core.inputs import EventPayloadError, RawConfig, normalize
from autoapprove_core.policy import should_approve

console = Console()


def _narrate(message: str) -> None:
    console.print(f"[dim]{escape(message)}[/dim]")


@click.command("run")
@click.option("--token", default=None, envvar="INPUT_TOKEN", help="Token of the approving identity.")
@click.option(
    "--allowed-review-for",
    default=None,
    envvar="INPUT_ALLOWED_REVIEW_FOR",
    help="Comma-separated logins whose PRs may be approved. Overrides config file.",
)
@click.option(
    "--review-as",
    default=None,
    envvar="INPUT_REVIEW_AS",
    help="Login that must be a requested reviewer. Overrides config file.",
)
@click.option(
    "--event-path",
    required=True,
    envvar="GITHUB_EVENT_PATH",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to the pull_request event payload JSON.",
)
@click.option("--repo", default=None, envvar="GITHUB_REPOSITORY", help="Repository in owner/name format.")
@click.option("--pr", "pr_number", type=int, default=None, help="Pull request number. Defaults to the event's.")
@click.option("--shadow", "-s", is_flag=True, help="Dry-run mode: report the decision without approving.")
@click.pass_context
def run_cmd(
    ctx,
    token: str | None,
    allowed_review_for: str | None,
    review_as: str | None,
    event_path: str,
    repo: str | None,
    pr_number: int | None,
    shadow: bool,
):
    """Approve the triggering pull request if the policy allows it.

    \b
    The PR is approved only when:
      - it was opened from the repository it targets (not a fork)
      - --review-as was requested as a reviewer
      - the PR author is listed in --allowed-review-for
    """
    config_path = (ctx.obj or {}).get("config_path", ".autoapprove.yml")
    config = load_config(
        config_path,
        cli_overrides={"allowed_review_for": allowed_review_for, "review_as": review_as},
    )

    if not config.get("review_as"):
        raise click.UsageError("No reviewer identity configured. Pass --review-as or set review_as in the config.")

    payload = load_event(event_path)
    raw = RawConfig(
        token=token or "",
        allowed_review_for=config["allowed_review_for"],
        review_as=config["review_as"],
    )
    try:
        record = normalize(raw, payload)
    except EventPayloadError as e:
        raise click.ClickException(str(e)) from e

    if not should_approve(record, narrate=_narrate):
        console.print("[yellow]Not approved.[/yellow]")
        return

    repo = repo or repository_name(payload)
    pr_number = pr_number if pr_number is not None else pull_request_number(payload)
    if not repo or pr_number is None:
        raise click.UsageError("Could not determine the repository and PR number. Pass --repo and --pr.")

    if shadow:
        console.print(f"[bold]Shadow mode: {escape(repo)}#{pr_number} would be approved (not posted).[/bold]")
        return

    # Fork PRs get no secrets, so the token is only needed once we approve.
    token = resolve_github_token(record.token)
    if not token:
        raise click.UsageError("No GitHub token found. Pass --token, set INPUT_TOKEN or GITHUB_TOKEN.")

    try:
        approve_pull_request(token, repo, pr_number)
    except GithubException as e:
        raise click.ClickException(f"Could not approve {repo}#{pr_number}: {e}") from e
    console.print(f"[green]Review posted: APPROVE on {escape(repo)}#{pr_number}[/green]")
