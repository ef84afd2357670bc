"""Main CLI entry point."""

import typer
from dotenv import load_dotenv

from .fetch import fetch

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="gh-triage-fetch",
    help="Fetch open GitHub issues for sync-triage",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command(name="fetch", context_settings={"help_option_names": ["-h", "--help"]})(
    fetch
)


if __name__ == "__main__":
    app()
