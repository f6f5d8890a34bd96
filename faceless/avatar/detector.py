"""Detection of accounts still showing their auto-generated identicon."""

import asyncio

from .hasher import PerceptualHasher

GITHUB_URL = "https://github.com"


def avatar_urls(username: str) -> tuple[str, str]:
    """Return the (profile image, default identicon) URLs for a username."""
    return (
        f"{GITHUB_URL}/{username}.png",
        f"{GITHUB_URL}/identicons/{username}.png",
    )


class AvatarDetector:
    """Compares a user's profile image with the identicon GitHub would generate."""

    def __init__(self, hasher: PerceptualHasher | None = None):
        self.hasher = hasher or PerceptualHasher()

    async def is_default_avatar(self, username: str) -> bool:
        """Check whether username still uses the default identicon.

        Both images are hashed concurrently by the same hasher. If either
        fetch or hash fails the error propagates; there is no verdict
        without both hashes. Accounts without any uploaded image are served
        the identicon itself and therefore match.

        Args:
            username: GitHub login to check

        Returns:
            True if the profile image and identicon hashes are equal
        """
        profile_url, identicon_url = avatar_urls(username)
        profile_hash, identicon_hash = await asyncio.gather(
            self.hasher.hash_url(profile_url),
            self.hasher.hash_url(identicon_url),
        )
        return bool(profile_hash == identicon_hash)
