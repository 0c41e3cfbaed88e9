"""Issue report CLI - summarize reactions on labelled GitHub issues."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.markup import escape

from .config import DEFAULT_LABELS, DEFAULT_OUTPUT_PATH, DEFAULT_REPOSITORIES
from .github_api import GitHubClient
from .output import render_json, write_json
from .scanner import IssueScanner, ScanConfig


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # urllib3 logs every connection at DEBUG.
    logging.getLogger("urllib3").setLevel(logging.WARNING)


@click.command()
@click.option(
    "--repo",
    "repos",
    multiple=True,
    help="GitHub repository URL to scan (repeatable). Defaults to the built-in list.",
)
@click.option(
    "--label",
    "labels",
    multiple=True,
    help="Label name of interest (repeatable). Defaults to the built-in list.",
)
@click.option(
    "--output",
    "-o",
    default=DEFAULT_OUTPUT_PATH,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Where to write the JSON report.",
)
@click.option("--token", envvar="GITHUB_TOKEN", default=None, help="GitHub token (or set GITHUB_TOKEN).")
@click.option("--dry-run", is_flag=True, help="Print the JSON report instead of writing it.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(repos, labels, output, token, dry_run, verbose):
    """Write a JSON summary of reactions on labelled issues."""
    _configure_logging(verbose)

    config = ScanConfig(
        repositories=tuple(repos) or DEFAULT_REPOSITORIES,
        labels=tuple(labels) or DEFAULT_LABELS,
    )
    # Keep stdout clean for the report itself on a dry run.
    console = Console(stderr=dry_run)

    with GitHubClient(token, console=console) as client:
        summaries = IssueScanner(client, config, console=console).collect()

    if dry_run:
        click.echo(render_json(summaries), nl=False)
        return

    path = write_json(output, summaries)
    console.print(f"[green]Saved {len(summaries)} issues to {escape(str(path))}[/green]")


if __name__ == "__main__":
    main()
