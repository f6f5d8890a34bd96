"""Helpers for running inside a GitHub Actions job.

Action inputs arrive as ``INPUT_<NAME>`` environment variables and failures
are reported with the ``::error::`` workflow command.
"""

import os

from rich.console import Console

console = Console()


def input_env_name(name: str) -> str:
    """Return the environment variable GitHub Actions uses for an input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str) -> str:
    """Return the value of an action input, or an empty string if unset."""
    return os.getenv(input_env_name(name), "").strip()


def _escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_failed(message: str) -> None:
    """Mark the current step as failed with message as the annotation."""
    # Workflow commands must reach the runner as a single unstyled line
    console.print(
        f"::error::{_escape_data(message)}",
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )
