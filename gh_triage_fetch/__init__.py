"""Fetch open GitHub issues for the sync-triage workflow."""

__version__ = "0.1.0"
