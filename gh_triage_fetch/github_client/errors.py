"""Exceptions raised while talking to the GitHub GraphQL API."""


class GitHubError(Exception):
    """Base class for all fetch failures."""


class GitHubAuthError(GitHubError):
    """No usable GitHub credential could be found."""


class GitHubAPIError(GitHubError):
    """A GraphQL request failed or was rejected by GitHub."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class GitHubResponseError(GitHubError):
    """A GraphQL response did not have the expected shape."""


class GitHubConfigError(GitHubError):
    """A configuration value could not be used."""
