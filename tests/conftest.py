"""Test configuration and fixtures."""

import io
import json
import os
from pathlib import Path
from typing import Any

import pytest
from PIL import Image, ImageDraw


def make_png(split: str) -> bytes:
    """Create a 64x64 PNG that is half black and half white.

    Args:
        split: "vertical" for a left/right split, "horizontal" for top/bottom
    """
    image = Image.new("L", (64, 64), 0)
    draw = ImageDraw.Draw(image)
    if split == "vertical":
        draw.rectangle([32, 0, 63, 63], fill=255)
    else:
        draw.rectangle([0, 32, 63, 63], fill=255)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture(autouse=True)
def clean_action_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove action inputs and tokens inherited from the environment."""
    for name in list(os.environ):
        if name.startswith("INPUT_"):
            monkeypatch.delenv(name)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_EVENT_PATH", raising=False)


@pytest.fixture
def identicon_png() -> bytes:
    return make_png("vertical")


@pytest.fixture
def custom_png() -> bytes:
    return make_png("horizontal")


@pytest.fixture
def event_payload() -> dict[str, Any]:
    """Minimal issues.opened webhook payload."""
    return {
        "action": "opened",
        "issue": {"number": 42, "title": "Something broke"},
        "repository": {"name": "widgets", "owner": {"login": "acme"}},
        "sender": {"login": "bob"},
    }


@pytest.fixture
def event_file(tmp_path: Path, event_payload: dict[str, Any]) -> Path:
    path = tmp_path / "event.json"
    path.write_text(json.dumps(event_payload), encoding="utf-8")
    return path
