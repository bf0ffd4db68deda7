from __future__ import annotations

import asyncio
import sys

import click
from rich.console import Console

from .client import GitHubClient, fetch_open_issues
from .config import DEFAULT_TARGET, load_env_file, load_token
from .errors import GhIssuesError
from .formatters import FORMATS, get_formatter
from .models import Issue

_stderr = Console(stderr=True)


load_env_file()


async def _run(token: str, verbose: bool) -> list[Issue]:
    def report(exc: GhIssuesError) -> None:
        if verbose:
            _stderr.print(f"[yellow]Warning:[/yellow] {exc}")

    async with GitHubClient(token) as client:
        return await fetch_open_issues(client, DEFAULT_TARGET, on_error=report)


@click.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMATS),
    default="debug",
    show_default=True,
    help="Output format.",
)
@click.option("--verbose", is_flag=True, help="Report fetch failures on stderr.")
def cli(output_format: str, verbose: bool) -> None:
    """List the open issues of freeCodeCamp/freeCodeCamp, pull requests excluded."""
    try:
        token = load_token()
        issues = asyncio.run(_run(token, verbose))
    except GhIssuesError as exc:
        _stderr.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    click.echo(get_formatter(output_format)(issues))
