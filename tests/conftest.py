"""Test configuration and fixtures."""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from gh_triage_fetch.github_client.client import GitHubGraphQLClient


def build_issue_node(
    number: int, updated_at: str = "2024-05-01T12:00:00Z", **overrides: Any
) -> dict[str, Any]:
    """Build a GraphQL issue node shaped like the real API response."""
    node: dict[str, Any] = {
        "number": number,
        "title": f"Issue {number}",
        "state": "OPEN",
        "author": {"login": "octocat"},
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": updated_at,
        "labels": {"nodes": [{"name": "bug"}]},
        "body": "Something is broken",
        "comments": {"nodes": []},
        "reactionGroups": [{"content": "THUMBS_UP", "reactors": {"totalCount": 2}}],
        "closedByPullRequestsReferences": {"nodes": []},
        "issueType": None,
    }
    node.update(overrides)
    return node


def build_page(
    nodes: list[dict[str, Any]],
    end_cursor: str | None = None,
    has_next_page: bool | None = None,
) -> dict[str, Any]:
    """Wrap issue nodes in a full GraphQL response document."""
    if has_next_page is None:
        has_next_page = end_cursor is not None
    return {
        "data": {
            "repository": {
                "issues": {
                    "nodes": nodes,
                    "pageInfo": {"hasNextPage": has_next_page, "endCursor": end_cursor},
                }
            }
        }
    }


class GraphQLRecorder:
    """Serve canned GraphQL responses and record what was sent."""

    def __init__(self, responses: list[Any]):
        self.responses = list(responses)
        self.payloads: list[dict[str, Any]] = []
        self.headers: list[httpx.Headers] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.payloads.append(json.loads(request.content))
        self.headers.append(request.headers)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, httpx.Response):
            return response
        return httpx.Response(200, json=response)

    @property
    def cursors(self) -> list[str | None]:
        return [payload["variables"].get("cursor") for payload in self.payloads]

    def client(self, token: str = "test_token", retries: int = 0) -> GitHubGraphQLClient:
        return GitHubGraphQLClient(
            token=token,
            retries=retries,
            http_client=httpx.Client(transport=httpx.MockTransport(self.handler)),
        )


@pytest.fixture
def issue_node() -> Callable[..., dict[str, Any]]:
    """Factory for GraphQL issue nodes."""
    return build_issue_node


@pytest.fixture
def issues_page() -> Callable[..., dict[str, Any]]:
    """Factory for GraphQL issue page responses."""
    return build_page


@pytest.fixture
def graphql_recorder() -> Callable[..., GraphQLRecorder]:
    """Factory for a recorder serving the given responses in order."""

    def _make(*responses: Any) -> GraphQLRecorder:
        return GraphQLRecorder(list(responses))

    return _make


@pytest.fixture
def three_page_responses() -> list[dict[str, Any]]:
    """Three pages chained by cursors c1, c2 and ending at c3."""
    return [
        build_page(
            [
                build_issue_node(5, "2024-05-05T00:00:00Z"),
                build_issue_node(4, "2024-05-04T00:00:00Z"),
            ],
            end_cursor="c1",
        ),
        build_page(
            [
                build_issue_node(3, "2024-05-03T00:00:00Z"),
                build_issue_node(2, "2024-05-02T00:00:00Z"),
            ],
            end_cursor="c2",
        ),
        build_page(
            [build_issue_node(1, "2024-05-01T00:00:00Z")],
            end_cursor="c3",
            has_next_page=False,
        ),
    ]
