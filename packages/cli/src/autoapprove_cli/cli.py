"""CLI entry point for autoapprove.

Commands:
  run   decide whether to approve the triggering pull request, and approve it
  init  write .autoapprove.yml and a GitHub Actions workflow
"""

from __future__ import annotations

import importlib.metadata

import click

from autoapprove_cli.commands.init import init_cmd
from autoapprove_cli.commands.run import run_cmd


@click.group()
@click.version_option(
    version=importlib.metadata.version("autoapprove"),
    prog_name="autoapprove",
)
@click.option(
    "--config",
    "config_path",
    default=".autoapprove.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="AUTOAPPROVE_CONFIG",
)
@click.pass_context
def main(ctx: click.Context, config_path: str):
    """Auto-approve pull requests from allow-listed authors."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


main.add_command(run_cmd)
main.add_command(init_cmd)
