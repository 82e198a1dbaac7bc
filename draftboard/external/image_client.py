"""
Image URL validation for board cells.

Organizers paste an image link into the cell on the clock. Before the
pick counts, the link is checked the way a browser would load it: it must
be an http(s) URL that answers with an image. Failures never touch the
draft state; the cell simply stays empty.
"""

import logging
from typing import Optional

import httpx

from ..errors import InvalidImageError

logger = logging.getLogger(__name__)


class ImageClient:
    """
    Async client that confirms a URL points at an image.

    Tries HEAD first and falls back to a streamed GET for servers that
    do not allow HEAD.
    """

    def __init__(self,
                 timeout: float = 5.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize image client.

        Args:
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.timeout = timeout

        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={
                "User-Agent": "DraftBoard/1.0.0",
                "Accept": "image/*",
            },
            follow_redirects=True,
            limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            transport=transport,
        )

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def _content_type(self, url: str) -> str:
        response = await self.client.head(url)

        if response.status_code == 405:
            async with self.client.stream("GET", url) as streamed:
                streamed.raise_for_status()
                return streamed.headers.get("content-type", "")

        response.raise_for_status()
        return response.headers.get("content-type", "")

    async def validate(self, url: str) -> str:
        """
        Check that url can be shown as an image.

        Returns:
            The stripped URL

        Raises:
            InvalidImageError: not an http(s) URL, unreachable, or not an image
        """
        url = url.strip()

        if not url.startswith("http"):
            raise InvalidImageError(url, "Please copy a valid image URL")

        try:
            content_type = await self._content_type(url)
        except httpx.HTTPStatusError as e:
            logger.warning(f"Image check for {url} returned HTTP {e.response.status_code}")
            raise InvalidImageError(url, f"HTTP {e.response.status_code}")
        except httpx.RequestError as e:
            logger.warning(f"Image check for {url} failed: {e}")
            raise InvalidImageError(url, "Image could not be loaded")

        if not content_type.lower().startswith("image/"):
            logger.info(f"Rejected {url}: content type {content_type!r}")
            raise InvalidImageError(url, "URL does not point to an image")

        return url


class PassthroughImageClient:
    """Skips network checks; used when image validation is disabled."""

    async def validate(self, url: str) -> str:
        url = url.strip()
        if not url.startswith("http"):
            raise InvalidImageError(url, "Please copy a valid image URL")
        return url

    async def close(self):
        pass
