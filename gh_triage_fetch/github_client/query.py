"""GraphQL query and variable construction for open issue fetching."""

from typing import Any

PAGE_SIZE = 100

ISSUES_QUERY = """
query($owner: String!, $name: String!, $cursor: String, $states: [IssueState!], $filterBy: IssueFilters) {
  repository(owner: $owner, name: $name) {
    issues(first: %d, after: $cursor, states: $states, filterBy: $filterBy, orderBy: {field: UPDATED_AT, direction: DESC}) {
      nodes {
        number
        title
        state
        author { login }
        createdAt
        updatedAt
        labels(first: 20) { nodes { name } }
        body
        comments(first: 100) {
          nodes {
            createdAt
            author { login }
          }
        }
        reactionGroups {
          content
          reactors { totalCount }
        }
        closedByPullRequestsReferences(first: 10) {
          nodes { number }
        }
        issueType { name }
      }
      pageInfo {
        hasNextPage
        endCursor
      }
    }
  }
}
""" % PAGE_SIZE


def split_repository(full_name: str) -> tuple[str, str]:
    """Split an ``owner/name`` repository identifier.

    Args:
        full_name: Repository in ``owner/name`` form

    Returns:
        Tuple of (owner, name)

    Raises:
        ValueError: If the identifier is not exactly ``owner/name``

    Example:
        >>> split_repository("octo-org/widgets")
        ("octo-org", "widgets")
    """
    parts = full_name.strip().split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError(
            f"Repository must be in 'owner/name' form, got '{full_name}'"
        )
    return parts[0], parts[1]


def build_issue_query_variables(
    owner: str,
    name: str,
    cursor: str | None = None,
    since: str | None = None,
) -> dict[str, Any]:
    """Build variables for ``ISSUES_QUERY``.

    The state filter is always OPEN. When ``since`` is given, issues must also
    have been updated at or after that timestamp. The timestamp is passed
    through untouched; GitHub rejects values it cannot parse.

    Args:
        owner: Repository owner (user or organization)
        name: Repository name
        cursor: End cursor of the previous page, None for the first page
        since: Optional ISO 8601 timestamp to filter by update time

    Returns:
        Variables dictionary ready to send alongside the query
    """
    variables: dict[str, Any] = {
        "owner": owner,
        "name": name,
        "states": ["OPEN"],
    }
    if cursor is not None:
        variables["cursor"] = cursor
    if since:
        variables["filterBy"] = {"since": since}
    return variables
