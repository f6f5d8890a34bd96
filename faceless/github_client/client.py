"""GitHub API client using PyGitHub."""

import os

from github import Auth, Github
from github.GithubException import (
    BadCredentialsException,
    GithubException,
    UnknownObjectException,
)
from github.Issue import Issue
from github.Repository import Repository
from rich.console import Console

from ..errors import (
    AuthenticationError,
    ConfigurationError,
    GitHubApiError,
    MutationError,
)

console = Console()


class GitHubClient:
    """GitHub API client exposing the calls needed to triage one issue.

    Every call is made exactly once; failures are raised, never retried.
    """

    def __init__(self, token: str | None = None):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub token. If None, reads from GITHUB_TOKEN env var.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ConfigurationError(
                "GitHub token is required. Set the repo-token input or "
                "GITHUB_TOKEN environment variable."
            )

        self.github = Github(auth=Auth.Token(self.token))

    def get_repository(self, owner: str, repo: str) -> Repository:
        """Get repository object."""
        try:
            return self.github.get_repo(f"{owner}/{repo}")
        except BadCredentialsException as e:
            raise AuthenticationError(f"GitHub rejected the token: {e}") from e
        except UnknownObjectException:
            raise GitHubApiError(f"Repository {owner}/{repo} not found")
        except GithubException as e:
            raise GitHubApiError(f"Error loading {owner}/{repo}: {e}") from e

    def _get_issue(self, owner: str, repo: str, issue_number: int) -> Issue:
        repository = self.get_repository(owner, repo)
        try:
            return repository.get_issue(issue_number)
        except UnknownObjectException:
            raise GitHubApiError(f"Issue #{issue_number} not found in {owner}/{repo}")

    def is_collaborator(self, owner: str, repo: str, username: str) -> bool:
        """Check whether username is a collaborator on the repository.

        Args:
            owner: Repository owner login
            repo: Repository name
            username: Login to check

        Returns:
            True if the user is a collaborator

        Raises:
            AuthenticationError: If the token is rejected
            GitHubApiError: For other API errors
        """
        repository = self.get_repository(owner, repo)
        try:
            return bool(repository.has_in_collaborators(username))
        except BadCredentialsException as e:
            raise AuthenticationError(f"GitHub rejected the token: {e}") from e
        except GithubException as e:
            raise GitHubApiError(
                f"Error checking collaborator status of {username}: {e}"
            ) from e

    def add_labels(
        self, owner: str, repo: str, issue_number: int, labels: list[str]
    ) -> None:
        """Add labels to an issue, keeping any labels it already has.

        Raises:
            AuthenticationError: If the token is rejected
            MutationError: If the labels could not be added
        """
        try:
            github_issue = self._get_issue(owner, repo, issue_number)
            github_issue.add_to_labels(*labels)
        except BadCredentialsException as e:
            raise AuthenticationError(f"GitHub rejected the token: {e}") from e
        except GithubException as e:
            raise MutationError(
                f"Error adding labels to issue #{issue_number}: {e}"
            ) from e

        console.print(f"Added labels to issue #{issue_number}: {labels}")

    def close_issue(self, owner: str, repo: str, issue_number: int) -> None:
        """Set the issue state to closed.

        Raises:
            AuthenticationError: If the token is rejected
            MutationError: If the issue could not be closed
        """
        try:
            github_issue = self._get_issue(owner, repo, issue_number)
            github_issue.edit(state="closed")
        except BadCredentialsException as e:
            raise AuthenticationError(f"GitHub rejected the token: {e}") from e
        except GithubException as e:
            raise MutationError(f"Error closing issue #{issue_number}: {e}") from e

        console.print(f"Closed issue #{issue_number}")

    def add_issue_comment(
        self, owner: str, repo: str, issue_number: int, comment: str
    ) -> None:
        """Add a comment to an issue.

        Raises:
            AuthenticationError: If the token is rejected
            MutationError: If the comment could not be created
        """
        try:
            github_issue = self._get_issue(owner, repo, issue_number)
            github_issue.create_comment(comment)
        except BadCredentialsException as e:
            raise AuthenticationError(f"GitHub rejected the token: {e}") from e
        except GithubException as e:
            raise MutationError(
                f"Error adding comment to issue #{issue_number}: {e}"
            ) from e

        console.print(f"Added comment to issue #{issue_number}")
