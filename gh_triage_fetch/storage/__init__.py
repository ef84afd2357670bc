"""Output writers for fetched issues."""

from .triage_export import flatten_issue, flatten_issues, write_issues

__all__ = ["flatten_issue", "flatten_issues", "write_issues"]
