"""Flatten fetched issues and write them for sync-triage."""

import json
import os
import stat
import tempfile
from collections.abc import Iterable
from pathlib import Path

from rich.console import Console

from ..github_client.models import FlatIssue, RawIssue

console = Console(stderr=True, soft_wrap=True)


def flatten_issue(raw: RawIssue) -> FlatIssue:
    """Convert a GraphQL issue node to the flat sync-triage record.

    Connection wrappers are dropped, labels become plain names and the state
    is lowercased to match ``gh issue list`` output.
    """
    return FlatIssue(
        number=raw.number,
        title=raw.title,
        state=raw.state.lower(),
        author=raw.author,
        created_at=raw.created_at,
        updated_at=raw.updated_at,
        labels=[label.name for label in raw.labels.nodes],
        body=raw.body,
        comments=list(raw.comments.nodes),
        reaction_groups=list(raw.reaction_groups),
        closed_by_pull_requests_references=list(
            raw.closed_by_pull_requests_references.nodes
        ),
        issue_type=raw.issue_type,
    )


def flatten_issues(raws: Iterable[RawIssue]) -> list[FlatIssue]:
    """Flatten issues, keeping their order."""
    return [flatten_issue(raw) for raw in raws]


def write_issues(issues: list[FlatIssue], output: str | Path) -> Path:
    """Write issues as a JSON array, replacing any existing file.

    The document is written to a temporary file next to ``output`` and then
    moved into place, so readers never see a truncated file.

    Args:
        issues: Flattened issues to write
        output: Target file path

    Returns:
        Path to the written file
    """
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    payload = [issue.model_dump(by_alias=True, mode="json") for issue in issues]

    fd, tmp_name = tempfile.mkstemp(
        dir=output_path.parent, prefix=f".{output_path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
            f.write("\n")
        os.chmod(tmp_name, _output_mode(output_path))
        os.replace(tmp_name, output_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    console.print(f"Wrote {len(issues)} issues to {output_path}", markup=False)
    return output_path


def _output_mode(path: Path) -> int:
    """Permission bits for the output: keep an existing file's, else honor umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
