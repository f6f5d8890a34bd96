"""Exceptions raised while triaging an issue."""


class FacelessError(Exception):
    """Base class for all faceless errors."""


class ConfigurationError(FacelessError):
    """Required configuration or trigger data is missing or invalid."""


class AuthenticationError(FacelessError):
    """The repository token was rejected."""


class AvatarError(FacelessError):
    """Base class for avatar hashing failures."""


class FetchError(AvatarError):
    """An image could not be retrieved."""


class HashError(AvatarError):
    """Retrieved bytes could not be decoded as an image."""


class GitHubApiError(FacelessError):
    """A repository API call failed."""


class MutationError(GitHubApiError):
    """Labeling, closing or commenting on an issue failed."""
