"""Pydantic models for GitHub GraphQL issue data.

Raw models map directly to the GraphQL v4 response shape requested by
``ISSUES_QUERY``. ``FlatIssue`` is the record written for sync-triage, which
mirrors ``gh issue list --json`` output (connection wrappers removed, state
lowercased).
API Reference: https://docs.github.com/en/graphql/reference/objects#issue
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class GraphQLModel(BaseModel):
    """Base model accepting camelCase GraphQL keys or snake_case names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GitHubActor(GraphQLModel):
    """Author of an issue or comment.

    API Reference: https://docs.github.com/en/graphql/reference/interfaces#actor
    """

    login: str = Field(..., description="GitHub username/login (string)")


class IssueLabel(GraphQLModel):
    """Label attached to an issue."""

    name: str = Field(..., description="Name of the label (string)")


class LabelConnection(GraphQLModel):
    nodes: list[IssueLabel] = Field(default_factory=list)


class IssueComment(GraphQLModel):
    """Comment summary; body is not requested."""

    created_at: str = Field(..., description="Timestamp of comment creation (ISO 8601)")
    author: GitHubActor | None = Field(
        None, description="Comment author, null for deleted accounts"
    )


class CommentConnection(GraphQLModel):
    nodes: list[IssueComment] = Field(default_factory=list)


class ReactorCount(GraphQLModel):
    total_count: int = Field(..., description="Number of reactors (integer)")


class ReactionGroup(GraphQLModel):
    """Reactions of one kind on an issue.

    API Reference: https://docs.github.com/en/graphql/reference/objects#reactiongroup
    """

    content: str = Field(..., description="Reaction kind, e.g. THUMBS_UP (string)")
    reactors: ReactorCount = Field(..., description="Reactor count wrapper")


class PullRequestReference(GraphQLModel):
    number: int = Field(..., description="Pull request number (integer)")


class PullRequestConnection(GraphQLModel):
    nodes: list[PullRequestReference] = Field(default_factory=list)


class IssueType(GraphQLModel):
    name: str = Field(..., description="Issue type name, e.g. Bug (string)")


class RawIssue(GraphQLModel):
    """Issue node as returned by the GraphQL ``repository.issues`` connection."""

    number: int = Field(..., description="Issue number within the repository (integer)")
    title: str = Field(..., description="Title of the issue (string)")
    state: Literal["OPEN", "CLOSED"] = Field(..., description="Issue state enum")
    author: GitHubActor | None = Field(
        None, description="Creator of the issue, null for deleted accounts"
    )
    created_at: str = Field(..., description="Timestamp of issue creation (ISO 8601)")
    updated_at: str = Field(..., description="Timestamp of last update (ISO 8601)")
    labels: LabelConnection = Field(
        default_factory=LabelConnection, description="First 20 labels"
    )
    body: str | None = Field(None, description="Issue body in markdown (string)")
    comments: CommentConnection = Field(
        default_factory=CommentConnection, description="First 100 comments"
    )
    reaction_groups: list[ReactionGroup] = Field(
        default_factory=list, description="Reaction counts grouped by kind"
    )
    closed_by_pull_requests_references: PullRequestConnection = Field(
        default_factory=PullRequestConnection,
        description="First 10 pull requests that will close this issue",
    )
    issue_type: IssueType | None = Field(None, description="Organization issue type")


class PageInfo(GraphQLModel):
    """Cursor metadata for a connection page."""

    has_next_page: bool = Field(..., description="Whether another page exists")
    end_cursor: str | None = Field(
        None, description="Cursor to pass as ``after`` for the next page"
    )


class IssueConnection(GraphQLModel):
    """One page of the ``repository.issues`` connection."""

    nodes: list[RawIssue] = Field(default_factory=list)
    page_info: PageInfo


class FlatIssue(GraphQLModel):
    """Issue record in the format expected by sync-triage.

    Field order is the serialized key order and must stay stable so repeated
    runs against the same data produce identical files.
    """

    number: int
    title: str
    state: Literal["open", "closed"]
    author: GitHubActor | None = None
    created_at: str
    updated_at: str
    labels: list[str] = Field(default_factory=list)
    body: str | None = None
    comments: list[IssueComment] = Field(default_factory=list)
    reaction_groups: list[ReactionGroup] = Field(default_factory=list)
    closed_by_pull_requests_references: list[PullRequestReference] = Field(
        default_factory=list
    )
    issue_type: IssueType | None = None
