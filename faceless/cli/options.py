"""Shared CLI option definitions.

Options that default to None fall back to the matching action input, then
to the built-in default.
"""

import typer

TOKEN_OPTION = typer.Option(
    None,
    "--token",
    "-t",
    help="GitHub token (defaults to the repo-token input or GITHUB_TOKEN)",
)

EVENT_PATH_OPTION = typer.Option(
    None,
    "--event-path",
    "-e",
    help="Path to the webhook payload (defaults to GITHUB_EVENT_PATH)",
)

LABEL_OPTION = typer.Option(
    None, "--label", "-l", help="Label applied to matching issues"
)

CLOSE_OPTION = typer.Option(
    None, "--close/--no-close", help="Close matching issues with a comment"
)

CLOSE_COMMENT_OPTION = typer.Option(
    None, "--close-comment", "-c", help="Comment posted when closing an issue"
)

HASH_SIZE_OPTION = typer.Option(
    None, "--hash-size", help="Perceptual hash grid size (default 16)"
)

HASH_ALGORITHM_OPTION = typer.Option(
    None,
    "--hash-algorithm",
    help="Perceptual hash algorithm: average, perceptual or difference",
)

DRY_RUN_OPTION = typer.Option(
    False, "--dry-run", "-d", help="Preview changes without applying them"
)
