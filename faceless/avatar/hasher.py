"""Perceptual hashing of remote images."""

import io
import logging
from collections.abc import Callable

import httpx
import imagehash
from PIL import Image

from ..errors import ConfigurationError, FetchError, HashError

logger = logging.getLogger(__name__)

USER_AGENT = "faceless/0.1.0"

HASH_ALGORITHMS: dict[str, Callable[..., imagehash.ImageHash]] = {
    "average": imagehash.average_hash,
    "perceptual": imagehash.phash,
    "difference": imagehash.dhash,
}

DEFAULT_HASH_SIZE = 16
DEFAULT_HASH_ALGORITHM = "average"


class PerceptualHasher:
    """Downloads images and reduces them to fixed-size perceptual hashes.

    Hash size and algorithm are fixed when the hasher is created, so every
    hash it produces can be compared with every other one.
    """

    def __init__(
        self,
        hash_size: int = DEFAULT_HASH_SIZE,
        algorithm: str = DEFAULT_HASH_ALGORITHM,
    ):
        """Initialize the hasher.

        Args:
            hash_size: Edge length of the hash grid (16 gives a 256-bit hash)
            algorithm: One of the keys of HASH_ALGORITHMS

        Raises:
            ConfigurationError: If the size or algorithm is not supported
        """
        if algorithm not in HASH_ALGORITHMS:
            raise ConfigurationError(
                f"Unknown hash algorithm '{algorithm}'. "
                f"Expected one of: {', '.join(sorted(HASH_ALGORITHMS))}"
            )
        if hash_size < 2:
            raise ConfigurationError(
                f"Hash size must be at least 2, got {hash_size}"
            )

        self._hash_size = hash_size
        self._algorithm = algorithm
        self.headers = {"User-Agent": USER_AGENT}

    @property
    def hash_size(self) -> int:
        return self._hash_size

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def hash_bytes(self, content: bytes) -> imagehash.ImageHash:
        """Hash already downloaded image bytes.

        Raises:
            HashError: If the bytes are not a decodable image
        """
        try:
            with Image.open(io.BytesIO(content)) as image:
                image.load()
                return HASH_ALGORITHMS[self._algorithm](
                    image, hash_size=self._hash_size
                )
        except (OSError, ValueError) as e:
            raise HashError(f"Could not decode image: {e}") from e

    async def hash_url(self, url: str) -> imagehash.ImageHash:
        """Download the image at url and hash it.

        A single request is made; redirects are followed because profile
        image URLs redirect to the avatar CDN.

        Raises:
            FetchError: On network failure or a non-200 final response
            HashError: If the response body is not a decodable image
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    url, headers=self.headers, follow_redirects=True
                )
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to fetch {url}: {e}") from e

        if response.status_code != 200:
            raise FetchError(
                f"Failed to fetch {url}: HTTP {response.status_code}"
            )

        image_hash = self.hash_bytes(response.content)
        logger.debug(
            "Hashed %s with %s/%d: %s",
            url,
            self._algorithm,
            self._hash_size,
            image_hash,
        )
        return image_hash
