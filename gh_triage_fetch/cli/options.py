"""Standardized CLI argument and option definitions."""

import typer

REPO_ARGUMENT = typer.Argument(
    ..., metavar="OWNER/REPO", help="GitHub repository in owner/name form"
)

OUTPUT_ARGUMENT = typer.Argument(
    ..., metavar="OUTPUT", help="JSON file to write, replaced if it exists"
)

SINCE_ARGUMENT = typer.Argument(
    None,
    metavar="[SINCE]",
    help="Only include issues updated at or after this ISO 8601 timestamp",
)

# Authentication options
TOKEN_OPTION = typer.Option(
    None,
    "--token",
    "-t",
    help="GitHub API token (defaults to GITHUB_TOKEN, GH_TOKEN or 'gh auth token')",
)

# Behavior options
RETRIES_OPTION = typer.Option(
    None,
    "--retries",
    min=0,
    help="Retries for transient request failures (defaults to GH_TRIAGE_RETRIES or 0)",
)

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Enable debug logging on stderr"
)
