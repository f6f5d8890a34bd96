"""Main CLI entry point."""

import asyncio
from typing import NoReturn

import typer
from dotenv import load_dotenv
from rich.console import Console

from .. import actions
from ..avatar import AvatarDetector, PerceptualHasher
from ..avatar.hasher import DEFAULT_HASH_ALGORITHM, DEFAULT_HASH_SIZE
from ..github_client import GitHubClient
from ..triage import IssueTriager, TriageConfiguration, load_event
from .options import (
    CLOSE_COMMENT_OPTION,
    CLOSE_OPTION,
    DRY_RUN_OPTION,
    EVENT_PATH_OPTION,
    HASH_ALGORITHM_OPTION,
    HASH_SIZE_OPTION,
    LABEL_OPTION,
    TOKEN_OPTION,
)

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="faceless",
    help="Triage issues opened by accounts without a custom avatar",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


def _fail(error: Exception) -> NoReturn:
    actions.set_failed(str(error))
    console.print(f"❌ [red]Error: {error}[/red]")
    raise typer.Exit(1)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def run(
    token: str | None = TOKEN_OPTION,
    event_path: str | None = EVENT_PATH_OPTION,
    label: str | None = LABEL_OPTION,
    close: bool | None = CLOSE_OPTION,
    close_comment: str | None = CLOSE_COMMENT_OPTION,
    hash_size: int | None = HASH_SIZE_OPTION,
    hash_algorithm: str | None = HASH_ALGORITHM_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
) -> None:
    """Triage the issue described by the triggering event.

    Labels the issue when its author is not a collaborator and still shows
    the default identicon, and closes it with a comment if --close is set.

    Examples:
        # Inside a GitHub Actions job (inputs come from INPUT_* variables)
        faceless run

        # Locally against a saved payload, without changing anything
        faceless run --event-path event.json --close --dry-run
    """
    try:
        overrides = {
            "label": label,
            "close_on_match": close,
            "close_comment": close_comment,
            "hash_size": hash_size,
            "hash_algorithm": hash_algorithm,
        }
        config = TriageConfiguration.from_action_inputs().model_copy(
            update={k: v for k, v in overrides.items() if v not in (None, "")}
        )
        event = load_event(event_path)
        hasher = PerceptualHasher(config.hash_size, config.hash_algorithm)
        client = GitHubClient(token=token or actions.get_input("repo-token") or None)

        triager = IssueTriager(client, AvatarDetector(hasher), config, dry_run=dry_run)
        outcome = triager.triage(event)
    except Exception as e:
        _fail(e)

    console.print(f"📊 [blue]Outcome: {outcome.value}[/blue]")


@app.command(
    name="check-avatar", context_settings={"help_option_names": ["-h", "--help"]}
)
def check_avatar(
    username: str = typer.Argument(..., help="GitHub login to check"),
    hash_size: int = typer.Option(
        DEFAULT_HASH_SIZE, "--hash-size", help="Perceptual hash grid size"
    ),
    hash_algorithm: str = typer.Option(
        DEFAULT_HASH_ALGORITHM, "--hash-algorithm", help="Perceptual hash algorithm"
    ),
) -> None:
    """Report whether a user still has the default identicon avatar."""
    try:
        detector = AvatarDetector(PerceptualHasher(hash_size, hash_algorithm))
        is_default = asyncio.run(detector.is_default_avatar(username))
    except Exception as e:
        _fail(e)

    if is_default:
        console.print(f"👤 [yellow]{username} uses the default avatar[/yellow]")
    else:
        console.print(f"🖼️  [green]{username} has a custom avatar[/green]")


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from faceless import __version__

    console.print(f"faceless v{__version__}")


if __name__ == "__main__":
    app()
