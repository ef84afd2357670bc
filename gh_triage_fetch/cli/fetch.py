"""CLI command for fetching open GitHub issues for sync-triage."""

import logging
from pathlib import Path

import typer
from rich.console import Console

from ..config import FetchConfig
from ..github_client.client import GitHubGraphQLClient
from ..github_client.errors import GitHubError
from ..github_client.query import split_repository
from ..storage.triage_export import flatten_issues, write_issues
from .options import (
    OUTPUT_ARGUMENT,
    REPO_ARGUMENT,
    RETRIES_OPTION,
    SINCE_ARGUMENT,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

console = Console(stderr=True, soft_wrap=True)


def fetch(
    repo: str = REPO_ARGUMENT,
    output: Path = OUTPUT_ARGUMENT,
    since: str | None = SINCE_ARGUMENT,
    token: str | None = TOKEN_OPTION,
    retries: int | None = RETRIES_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Fetch all open issues of a repository and write them as JSON.

    Issues are ordered by last update, newest first. Progress is reported on
    stderr; the output file is only written once every page has been fetched.

    Examples:
        gh-triage-fetch myorg/myrepo issues.json
        gh-triage-fetch myorg/myrepo issues.json 2024-06-01T00:00:00Z
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )

    try:
        owner, name = split_repository(repo)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="OWNER/REPO")

    try:
        config = FetchConfig()
        client = GitHubGraphQLClient(
            token=config.resolve_token(token),
            graphql_url=config.graphql_url,
            timeout=config.timeout,
            retries=config.retries if retries is None else retries,
        )
        with client:
            raw_issues = client.fetch_open_issues(owner, name, since=since)

        write_issues(flatten_issues(raw_issues), output)
    except (GitHubError, OSError) as e:
        console.print(f"❌ Error: {e}", markup=False)
        raise typer.Exit(1)
