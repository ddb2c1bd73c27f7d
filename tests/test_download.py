"""Tests for image download validation."""

import pytest

from artdisplay.api.download import MIN_IMAGE_BYTES, download_image
from artdisplay.api.http import HttpResponse

IMAGE_URL = "https://images.example.org/art.jpg"


class TestDownloadImage:
    """Tests for download_image."""

    @pytest.mark.asyncio
    async def test_rejects_999_bytes(self, fake_client) -> None:
        """Test a body one byte short of the minimum is rejected."""
        fake_client.image(IMAGE_URL, body=b"x" * 999, content_type="image/png")
        assert await download_image(fake_client, IMAGE_URL) is None

    @pytest.mark.asyncio
    async def test_accepts_1000_byte_png(self, fake_client) -> None:
        """Test a body of exactly the minimum size is accepted."""
        body = b"x" * MIN_IMAGE_BYTES
        fake_client.image(IMAGE_URL, body=body, content_type="image/png")
        assert await download_image(fake_client, IMAGE_URL) == (body, "image/png")

    @pytest.mark.asyncio
    async def test_rejects_html(self, fake_client) -> None:
        """Test a large non-image body is rejected."""
        fake_client.image(IMAGE_URL, body=b"x" * 2000, content_type="text/html")
        assert await download_image(fake_client, IMAGE_URL) is None

    @pytest.mark.asyncio
    async def test_rejects_404(self, fake_client) -> None:
        """Test an error status is rejected regardless of body."""
        fake_client.route(
            IMAGE_URL, HttpResponse(404, {"content-type": "image/jpeg"}, b"x" * 5000)
        )
        assert await download_image(fake_client, IMAGE_URL) is None

    @pytest.mark.asyncio
    async def test_strips_content_type_parameters(self, fake_client) -> None:
        """Test parameters after the MIME type are dropped."""
        fake_client.image(IMAGE_URL, body=b"x" * 1500, content_type="image/jpeg; charset=binary")
        result = await download_image(fake_client, IMAGE_URL)
        assert result is not None
        assert result[1] == "image/jpeg"

    @pytest.mark.asyncio
    async def test_transport_error_is_soft(self, fake_client) -> None:
        """Test connection errors yield None instead of raising."""
        fake_client.route(IMAGE_URL, ConnectionError("reset"))
        assert await download_image(fake_client, IMAGE_URL) is None

    @pytest.mark.asyncio
    async def test_timeout_is_soft(self, fake_client) -> None:
        """Test timeouts yield None instead of raising."""
        fake_client.route(IMAGE_URL, TimeoutError("slow"))
        assert await download_image(fake_client, IMAGE_URL) is None

    @pytest.mark.asyncio
    async def test_passes_headers(self, fake_client) -> None:
        """Test extra headers reach the HTTP client."""
        fake_client.image(IMAGE_URL)
        await download_image(fake_client, IMAGE_URL, {"Referer": "https://example.org/"})
        assert fake_client.calls[0][1] == {"Referer": "https://example.org/"}
