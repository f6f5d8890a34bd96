"""GitHub client package for API interaction."""

from .client import GitHubClient

__all__ = ["GitHubClient"]
