"""Triage of a single newly opened issue."""

import asyncio
from enum import Enum

from rich.console import Console

from ..avatar.detector import AvatarDetector
from ..github_client.client import GitHubClient
from .config import TriageConfiguration
from .event import TriggerEvent

console = Console()


class TriageOutcome(str, Enum):
    """Terminal state reached for an issue."""

    SKIPPED_COLLABORATOR = "skipped_collaborator"
    SKIPPED_CUSTOM_AVATAR = "skipped_custom_avatar"
    LABELED = "labeled"
    CLOSED = "closed"


class IssueTriager:
    """Labels, and optionally closes, issues whose author has no custom avatar.

    Collaborators are never triaged. Any error raised by the client or the
    detector propagates to the caller; mutations already made are not undone.
    """

    def __init__(
        self,
        client: GitHubClient,
        detector: AvatarDetector,
        config: TriageConfiguration,
        dry_run: bool = False,
    ):
        self.client = client
        self.detector = detector
        self.config = config
        self.dry_run = dry_run

    def triage(self, event: TriggerEvent) -> TriageOutcome:
        """Run the triage for one event.

        Args:
            event: The issue and author to triage

        Returns:
            The terminal state that was reached (or would be, in a dry run)
        """
        console.print(
            f"🔍 [blue]Triggered for issue #{event.issue_number} in "
            f"{event.owner}/{event.repo} by {event.sender}[/blue]"
        )

        if self.client.is_collaborator(event.owner, event.repo, event.sender):
            console.print(
                f"✅ [green]{event.sender} is a repository collaborator[/green]"
            )
            return TriageOutcome.SKIPPED_COLLABORATOR

        if not asyncio.run(self.detector.is_default_avatar(event.sender)):
            console.print(
                f"✅ [green]{event.sender} does not have a default profile image[/green]"
            )
            return TriageOutcome.SKIPPED_CUSTOM_AVATAR

        console.print(
            f"🏷️  [blue]Labeling issue #{event.issue_number} with label "
            f"{self.config.label}[/blue]"
        )
        if self.dry_run:
            console.print("  [yellow]Dry run: label not applied[/yellow]")
        else:
            self.client.add_labels(
                event.owner, event.repo, event.issue_number, [self.config.label]
            )

        if not self.config.close_on_match:
            return TriageOutcome.LABELED

        # Not atomic: a failed comment leaves the issue closed without one
        console.print(f"🔒 [blue]Closing issue #{event.issue_number}[/blue]")
        if self.dry_run:
            console.print(
                "  [yellow]Dry run: issue not closed, comment not posted[/yellow]"
            )
            console.print(self.config.close_comment, markup=False)
        else:
            self.client.close_issue(event.owner, event.repo, event.issue_number)
            self.client.add_issue_comment(
                event.owner,
                event.repo,
                event.issue_number,
                self.config.close_comment,
            )

        return TriageOutcome.CLOSED
