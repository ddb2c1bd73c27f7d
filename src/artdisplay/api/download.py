"""Image download with validation, shared by all sources."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from artdisplay.api.http import HttpClient

logger = logging.getLogger(__name__)

# Smaller bodies are placeholders or error pages
MIN_IMAGE_BYTES = 1000


async def download_image(
    client: HttpClient,
    url: str,
    headers: Mapping[str, str] | None = None,
) -> tuple[bytes, str] | None:
    """Download an image and check it is usable.

    A response is accepted only when the status is 2xx, the Content-Type
    starts with ``image/`` and the body is at least ``MIN_IMAGE_BYTES`` long.
    Every failure is soft: the caller moves on to its next candidate.

    Args:
        client: HTTP client to use.
        url: Image URL.
        headers: Extra request headers (source-specific).

    Returns:
        Tuple of (image bytes, MIME type without parameters), or None.
    """
    try:
        response = await client.get(url, headers=headers)
    except OSError as e:
        logger.debug("Image download failed for %s: %s", url, e)
        return None

    if not response.ok:
        logger.warning("Image HTTP %d: %s", response.status, url)
        return None

    content_type = response.content_type
    if not content_type.startswith("image/"):
        logger.warning("Not an image (%s): %s", content_type, url)
        return None

    if len(response.body) < MIN_IMAGE_BYTES:
        logger.warning("Image too small (%d bytes): %s", len(response.body), url)
        return None

    mime_type = content_type.split(";", 1)[0].strip()
    return response.body, mime_type
