"""Configuration for GitHub issue fetching."""

import logging
import os
import shutil
import subprocess
from typing import Any

from .github_client.client import DEFAULT_GRAPHQL_URL, DEFAULT_TIMEOUT
from .github_client.errors import GitHubAuthError, GitHubConfigError

logger = logging.getLogger(__name__)

NUMBER_KINDS = {float: "a number", int: "an integer"}


class FetchConfig:
    """Configuration class for the GraphQL fetcher, read from environment variables."""

    def __init__(self) -> None:
        """Initialize fetch configuration from environment variables."""
        self.token: str | None = os.getenv("GITHUB_TOKEN") or os.getenv("GH_TOKEN")
        self.graphql_url: str = os.getenv("GITHUB_GRAPHQL_URL", DEFAULT_GRAPHQL_URL)
        self.timeout: float = _env_number("GITHUB_TIMEOUT", float, DEFAULT_TIMEOUT)
        self.retries: int = _env_number("GH_TRIAGE_RETRIES", int, 0)
        self.validate()

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        if self.timeout <= 0:
            raise GitHubConfigError(
                f"GITHUB_TIMEOUT must be greater than 0, got {self.timeout}"
            )
        if self.retries < 0:
            raise GitHubConfigError(
                f"GH_TRIAGE_RETRIES must not be negative, got {self.retries}"
            )

    def resolve_token(self, token: str | None = None) -> str:
        """Return the first available credential.

        Order: explicit token, ``GITHUB_TOKEN``/``GH_TOKEN``, then the token
        stored by the ``gh`` CLI.

        Raises:
            GitHubAuthError: If no credential is available
        """
        resolved = token or self.token or gh_cli_token()
        if not resolved:
            raise GitHubAuthError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable "
                "or log in with 'gh auth login'."
            )
        return resolved


def gh_cli_token() -> str | None:
    """Read the token from the ``gh`` CLI credential store, if it is installed."""
    gh = shutil.which("gh")
    if gh is None:
        return None

    result = subprocess.run(
        [gh, "auth", "token"], capture_output=True, text=True, check=False
    )
    if result.returncode != 0:
        logger.debug("gh auth token failed: %s", result.stderr.strip())
        return None
    return result.stdout.strip() or None


def _env_number(name: str, convert: type, default: float) -> Any:
    """Read a numeric environment variable, raising a config error if malformed."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return convert(raw)
    except ValueError as e:
        raise GitHubConfigError(
            f"{name} must be {NUMBER_KINDS[convert]}, got '{raw}'"
        ) from e
