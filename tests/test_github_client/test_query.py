"""Tests for GraphQL query and variable construction."""

import pytest

from gh_triage_fetch.github_client.query import (
    ISSUES_QUERY,
    PAGE_SIZE,
    build_issue_query_variables,
    split_repository,
)


class TestIssuesQuery:
    """Test the issues query document."""

    def test_orders_by_update_time_descending(self) -> None:
        """Test results are requested newest-updated first."""
        assert "orderBy: {field: UPDATED_AT, direction: DESC}" in ISSUES_QUERY

    def test_page_size(self) -> None:
        """Test the page size is fixed at 100."""
        assert PAGE_SIZE == 100
        assert "issues(first: 100, after: $cursor" in ISSUES_QUERY

    def test_filters_are_variables(self) -> None:
        """Test state and since filters are passed as variables, not spliced."""
        assert "states: $states" in ISSUES_QUERY
        assert "filterBy: $filterBy" in ISSUES_QUERY
        assert "$filterBy: IssueFilters" in ISSUES_QUERY
        assert "%" not in ISSUES_QUERY

    def test_requests_page_info(self) -> None:
        """Test pagination metadata is part of the selection."""
        assert "hasNextPage" in ISSUES_QUERY
        assert "endCursor" in ISSUES_QUERY

    @pytest.mark.parametrize(
        "selection",
        [
            "labels(first: 20)",
            "comments(first: 100)",
            "closedByPullRequestsReferences(first: 10)",
            "reactors { totalCount }",
            "issueType { name }",
        ],
    )
    def test_field_selection(self, selection: str) -> None:
        """Test nested connections use the documented limits."""
        assert selection in ISSUES_QUERY


class TestBuildIssueQueryVariables:
    """Test build_issue_query_variables function."""

    def test_first_page_without_since(self) -> None:
        """Test first page variables select open issues only."""
        variables = build_issue_query_variables("octo-org", "widgets")

        assert variables == {
            "owner": "octo-org",
            "name": "widgets",
            "states": ["OPEN"],
        }

    def test_with_cursor_and_since(self) -> None:
        """Test cursor and since filter are both included."""
        variables = build_issue_query_variables(
            "octo-org", "widgets", cursor="abc", since="2024-06-01T00:00:00Z"
        )

        assert variables["cursor"] == "abc"
        assert variables["states"] == ["OPEN"]
        assert variables["filterBy"] == {"since": "2024-06-01T00:00:00Z"}

    def test_empty_since_is_ignored(self) -> None:
        """Test an empty since string behaves like no filter."""
        variables = build_issue_query_variables("octo-org", "widgets", since="")

        assert "filterBy" not in variables

    def test_since_is_not_validated(self) -> None:
        """Test the since value is passed through for GitHub to validate."""
        variables = build_issue_query_variables(
            "octo-org", "widgets", since='yesterday" } evil'
        )

        assert variables["filterBy"]["since"] == 'yesterday" } evil'
        assert "yesterday" not in ISSUES_QUERY
        assert "filterBy: $filterBy" in ISSUES_QUERY


class TestSplitRepository:
    """Test split_repository function."""

    def test_valid(self) -> None:
        """Test owner/name splitting."""
        assert split_repository("octo-org/widgets") == ("octo-org", "widgets")

    @pytest.mark.parametrize("value", ["widgets", "a/b/c", "/widgets", "octo/", ""])
    def test_invalid(self, value: str) -> None:
        """Test identifiers that are not owner/name are rejected."""
        with pytest.raises(ValueError, match="owner/name"):
            split_repository(value)
