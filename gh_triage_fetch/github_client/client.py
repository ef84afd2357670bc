"""GitHub GraphQL client for paginated issue fetching."""

import logging
import time
from typing import Any

import httpx
from pydantic import ValidationError
from rich.console import Console

from .. import __version__
from .errors import GitHubAPIError, GitHubAuthError, GitHubResponseError
from .models import IssueConnection, RawIssue
from .query import ISSUES_QUERY, build_issue_query_variables

console = Console(stderr=True, soft_wrap=True)
logger = logging.getLogger(__name__)

DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"
DEFAULT_TIMEOUT = 30.0

# Statuses worth another attempt when retries are enabled
RETRYABLE_STATUS_CODES = {429, 502, 503, 504}
MAX_BACKOFF_SECONDS = 60


class GitHubGraphQLClient:
    """GitHub GraphQL API client with optional bounded retries."""

    def __init__(
        self,
        token: str | None,
        graphql_url: str = DEFAULT_GRAPHQL_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retries: int = 0,
        http_client: httpx.Client | None = None,
    ):
        """Initialize the client.

        Args:
            token: GitHub token sent as a bearer credential
            graphql_url: GraphQL endpoint, override for GitHub Enterprise
            timeout: Request timeout in seconds
            retries: Extra attempts for transient failures, 0 disables retrying
            http_client: Preconfigured httpx client, mainly for tests
        """
        if not token:
            raise GitHubAuthError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.graphql_url = graphql_url
        self.retries = max(retries, 0)
        self.headers = {
            "Authorization": f"bearer {token}",
            "User-Agent": f"gh-triage-fetch/{__version__}",
            "Accept": "application/json",
        }
        self.http = http_client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "GitHubGraphQLClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.http.close()

    def _backoff(self, attempt: int, reason: str) -> None:
        wait = min(2**attempt, MAX_BACKOFF_SECONDS)
        console.print(f"{reason}, retrying in {wait}s...", markup=False)
        time.sleep(wait)

    def _post(self, payload: dict[str, Any]) -> httpx.Response:
        """POST a GraphQL payload, retrying transient failures if enabled."""
        attempt = 0
        while True:
            try:
                response = self.http.post(
                    self.graphql_url, json=payload, headers=self.headers
                )
            except httpx.TransportError as e:
                if attempt >= self.retries:
                    raise GitHubAPIError(f"Request to GitHub failed: {e}") from e
                self._backoff(attempt, f"Request error ({e})")
                attempt += 1
                continue

            status = response.status_code
            if status in RETRYABLE_STATUS_CODES and attempt < self.retries:
                self._backoff(attempt, f"GitHub returned HTTP {status}")
                attempt += 1
                continue

            return response

    def execute(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """Run a GraphQL query and return its ``data`` object.

        Raises:
            GitHubAPIError: On transport errors, HTTP errors, non-JSON bodies
                or a GraphQL ``errors`` array
        """
        logger.debug("GraphQL variables: %s", variables)
        response = self._post({"query": query, "variables": variables})

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise GitHubAPIError(
                f"GitHub returned HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
            ) from e

        try:
            result = response.json()
        except ValueError as e:
            raise GitHubAPIError(
                "GitHub returned a non-JSON response",
                status_code=response.status_code,
            ) from e

        if not isinstance(result, dict):
            raise GitHubAPIError("GitHub returned an unexpected JSON document")

        errors = result.get("errors")
        if errors:
            messages = "; ".join(
                str(error.get("message", error) if isinstance(error, dict) else error)
                for error in errors
            )
            raise GitHubAPIError(f"GraphQL query failed: {messages}")

        data = result.get("data")
        if not isinstance(data, dict):
            raise GitHubAPIError("GraphQL response has no data")
        return data

    def fetch_issue_page(
        self,
        owner: str,
        name: str,
        cursor: str | None = None,
        since: str | None = None,
    ) -> IssueConnection:
        """Fetch and validate one page of open issues."""
        variables = build_issue_query_variables(owner, name, cursor=cursor, since=since)
        data = self.execute(ISSUES_QUERY, variables)

        repository = data.get("repository")
        if repository is None:
            raise GitHubAPIError(f"Repository {owner}/{name} not found")

        try:
            return IssueConnection.model_validate(repository["issues"])
        except (KeyError, TypeError) as e:
            raise GitHubResponseError(
                f"Response for {owner}/{name} has no issues connection"
            ) from e
        except ValidationError as e:
            raise GitHubResponseError(
                f"Unexpected issue data for {owner}/{name}: {e}"
            ) from e

    def fetch_open_issues(
        self, owner: str, name: str, since: str | None = None
    ) -> list[RawIssue]:
        """Fetch every open issue in a repository, most recently updated first.

        Pages are requested one at a time until GitHub reports no next page.
        Any failure aborts the whole fetch.

        Args:
            owner: Repository owner
            name: Repository name
            since: Optional ISO 8601 timestamp, only issues updated at or after
                it are returned

        Returns:
            All issues in the order GitHub returned them
        """
        issues: list[RawIssue] = []
        cursor: str | None = None
        page = 1

        while True:
            connection = self.fetch_issue_page(owner, name, cursor=cursor, since=since)
            issues.extend(connection.nodes)
            console.print(f"Fetched page {page} ({len(connection.nodes)} issues)")

            if not connection.page_info.has_next_page:
                break

            cursor = connection.page_info.end_cursor
            if cursor is None:
                raise GitHubResponseError(
                    f"Page {page} reports more pages but has no end cursor"
                )
            page += 1

        return issues
