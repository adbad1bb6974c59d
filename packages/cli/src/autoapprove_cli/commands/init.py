"""init command: write .autoapprove.yml and a GitHub Actions workflow."""

from __future__ import annotations

from pathlib import Path

import click
import yaml
from rich.console import Console

console = Console()

_WORKFLOW_TEMPLATE = """\
name: Auto approve

on:
  pull_request:
    types: [review_requested]

jobs:
  approve:
    runs-on: ubuntu-latest

    steps:
      - uses: actions/checkout@v4

      - name: Set up Python
        uses: actions/setup-python@v5
        with:
          python-version: "3.12"

      - name: Install autoapprove
        run: pip install "autoapprove=={version}"

      - name: Approve pull request
        env:
          INPUT_TOKEN: ${{{{ secrets.{secret_name} }}}}
        run: autoapprove run
"""


@click.command("init")
@click.option("--review-as", default=None, help="Login of the approving identity.")
@click.option("--allowed-review-for", default=None, help="Comma-separated logins whose PRs may be approved.")
@click.option("--secret-name", default="AUTO_APPROVE_TOKEN", show_default=True, help="Repository secret holding the token.")
@click.pass_context
def init_cmd(ctx, review_as: str | None, allowed_review_for: str | None, secret_name: str):
    """Set up autoapprove for a repository.

    Writes the config file and optionally generates a GitHub Actions workflow
    that runs on review requests.
    """
    if review_as is None:
        review_as = click.prompt("Approving identity (login)")
    if allowed_review_for is None:
        allowed_review_for = click.prompt("Allowed PR authors (comma-separated logins)", default="", show_default=False)

    config_path = Path((ctx.obj or {}).get("config_path", ".autoapprove.yml"))
    _write_config(config_path, {"review_as": review_as, "allowed_review_for": allowed_review_for})
    console.print(f"[green]Created {config_path}[/green]")

    if click.confirm("\nGenerate .github/workflows/autoapprove.yml for GitHub Actions?", default=True):
        _write_workflow(secret_name)
        console.print("[green]Created .github/workflows/autoapprove.yml[/green]")
        console.print(
            f"\n[yellow]Remember to add [bold]{secret_name}[/bold] (a token for '{review_as}') to your "
            "GitHub repository secrets (Settings → Secrets → Actions).[/yellow]"
        )

    console.print("\n[bold green]Setup complete![/bold green]")


def _write_config(path: Path, config: dict) -> None:
    """Write or update the config file, preserving any existing keys."""
    existing: dict = {}
    if path.exists():
        existing = yaml.safe_load(path.read_text()) or {}
    existing.update(config)
    path.write_text(yaml.dump(existing, default_flow_style=False, sort_keys=False))


def _get_version() -> str:
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("autoapprove")
    except PackageNotFoundError:
        return "0.1.0"


def _write_workflow(secret_name: str) -> None:
    workflow_dir = Path(".github/workflows")
    workflow_dir.mkdir(parents=True, exist_ok=True)
    (workflow_dir / "autoapprove.yml").write_text(
        _WORKFLOW_TEMPLATE.format(secret_name=secret_name, version=_get_version())
    )
