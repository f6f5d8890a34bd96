"""Avatar hashing and default-avatar detection."""

from .detector import AvatarDetector, avatar_urls
from .hasher import HASH_ALGORITHMS, PerceptualHasher

__all__ = [
    "AvatarDetector",
    "HASH_ALGORITHMS",
    "PerceptualHasher",
    "avatar_urls",
]
