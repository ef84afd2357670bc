"""GitHub GraphQL client package for issue fetching."""

from .client import GitHubGraphQLClient
from .errors import (
    GitHubAPIError,
    GitHubAuthError,
    GitHubConfigError,
    GitHubError,
    GitHubResponseError,
)
from .models import FlatIssue, IssueConnection, PageInfo, RawIssue
from .query import ISSUES_QUERY, build_issue_query_variables, split_repository

__all__ = [
    "GitHubGraphQLClient",
    "GitHubError",
    "GitHubAuthError",
    "GitHubConfigError",
    "GitHubAPIError",
    "GitHubResponseError",
    "RawIssue",
    "FlatIssue",
    "IssueConnection",
    "PageInfo",
    "ISSUES_QUERY",
    "build_issue_query_variables",
    "split_repository",
]
