"""Tests for perceptual image hashing."""

from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from faceless.avatar.hasher import PerceptualHasher
from faceless.errors import ConfigurationError, FetchError, HashError


def _response(content: bytes, status_code: int = 200) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.content = content
    return response


class TestPerceptualHasher:
    """Test PerceptualHasher class."""

    def test_defaults(self) -> None:
        hasher = PerceptualHasher()
        assert hasher.hash_size == 16
        assert hasher.algorithm == "average"

    def test_unknown_algorithm(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown hash algorithm"):
            PerceptualHasher(algorithm="blockhash")

    def test_hash_size_too_small(self) -> None:
        with pytest.raises(ConfigurationError, match="at least 2"):
            PerceptualHasher(hash_size=1)

    @pytest.mark.parametrize("algorithm", ["average", "perceptual", "difference"])
    def test_hash_bytes_is_deterministic(
        self, algorithm: str, identicon_png: bytes
    ) -> None:
        """Hashing the same bytes twice yields the same hash."""
        hasher = PerceptualHasher(algorithm=algorithm)
        assert hasher.hash_bytes(identicon_png) == hasher.hash_bytes(identicon_png)

    def test_hash_bytes_uses_configured_size(self, identicon_png: bytes) -> None:
        image_hash = PerceptualHasher(hash_size=8).hash_bytes(identicon_png)
        assert image_hash.hash.shape == (8, 8)

    def test_different_images_hash_differently(
        self, identicon_png: bytes, custom_png: bytes
    ) -> None:
        hasher = PerceptualHasher()
        assert hasher.hash_bytes(identicon_png) != hasher.hash_bytes(custom_png)

    def test_hash_bytes_invalid_image(self) -> None:
        with pytest.raises(HashError, match="Could not decode image"):
            PerceptualHasher().hash_bytes(b"<html>not an image</html>")

    @pytest.mark.asyncio
    async def test_hash_url_success(self, identicon_png: bytes) -> None:
        hasher = PerceptualHasher()

        with patch("httpx.AsyncClient") as mock_client:
            mock_instance = AsyncMock()
            mock_client.return_value.__aenter__.return_value = mock_instance
            mock_instance.get.return_value = _response(identicon_png)

            result = await hasher.hash_url("https://github.com/bob.png")

        assert result == hasher.hash_bytes(identicon_png)
        mock_instance.get.assert_called_once_with(
            "https://github.com/bob.png",
            headers=hasher.headers,
            follow_redirects=True,
        )

    @pytest.mark.asyncio
    async def test_hash_url_non_200(self) -> None:
        with patch("httpx.AsyncClient") as mock_client:
            mock_instance = AsyncMock()
            mock_client.return_value.__aenter__.return_value = mock_instance
            mock_instance.get.return_value = _response(b"", status_code=404)

            with pytest.raises(FetchError, match="HTTP 404"):
                await PerceptualHasher().hash_url("https://github.com/ghost.png")

    @pytest.mark.asyncio
    async def test_hash_url_network_error(self) -> None:
        with patch("httpx.AsyncClient") as mock_client:
            mock_instance = AsyncMock()
            mock_client.return_value.__aenter__.return_value = mock_instance
            mock_instance.get.side_effect = httpx.ConnectError("connection refused")

            with pytest.raises(FetchError, match="connection refused"):
                await PerceptualHasher().hash_url("https://github.com/bob.png")

    @pytest.mark.asyncio
    async def test_hash_url_undecodable_body(self) -> None:
        with patch("httpx.AsyncClient") as mock_client:
            mock_instance = AsyncMock()
            mock_client.return_value.__aenter__.return_value = mock_instance
            mock_instance.get.return_value = _response(b"garbage")

            with pytest.raises(HashError):
                await PerceptualHasher().hash_url("https://github.com/bob.png")
