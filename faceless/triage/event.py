"""The webhook event that triggered a triage run."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ConfigurationError


def _lookup(payload: dict[str, Any], path: str) -> Any:
    value: Any = payload
    for key in path.split("."):
        if not isinstance(value, dict) or value.get(key) in (None, ""):
            raise ConfigurationError(f"Event payload is missing '{path}'")
        value = value[key]
    return value


class TriggerEvent(BaseModel):
    """Identity of the issue being triaged and the user who opened it.

    Maps the relevant fields of the GitHub ``issues`` webhook payload.
    API Reference: https://docs.github.com/en/webhooks/webhook-events-and-payloads#issues
    """

    model_config = ConfigDict(frozen=True)

    issue_number: int = Field(..., description="Issue number (integer)")
    owner: str = Field(..., description="Repository owner login (string)")
    repo: str = Field(..., description="Repository name (string)")
    sender: str = Field(..., description="Login of the user who triggered the event")

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "TriggerEvent":
        """Build an event from a decoded webhook payload.

        Raises:
            ConfigurationError: If an identifying field is missing
        """
        return cls(
            issue_number=_lookup(payload, "issue.number"),
            owner=_lookup(payload, "repository.owner.login"),
            repo=_lookup(payload, "repository.name"),
            sender=_lookup(payload, "sender.login"),
        )


def load_event(event_path: str | Path | None = None) -> TriggerEvent:
    """Load the triggering event from a payload file.

    Args:
        event_path: Path to the JSON payload. If None, reads GITHUB_EVENT_PATH.

    Raises:
        ConfigurationError: If the file is missing, unreadable or incomplete
    """
    path = event_path or os.getenv("GITHUB_EVENT_PATH")
    if not path:
        raise ConfigurationError(
            "No event payload. Set GITHUB_EVENT_PATH or pass --event-path."
        )

    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read event payload {path}: {e}") from e

    if not isinstance(payload, dict):
        raise ConfigurationError(f"Event payload {path} is not a JSON object")

    return TriggerEvent.from_payload(payload)
