"""Read stylesheets and documents over http(s) or from disk."""

from __future__ import annotations

import logging
import os.path
from pathlib import Path

import httpx

from csstrim._gather import gather_all
from csstrim.errors import FetchError
from csstrim.oracle import Document
from csstrim.paths import is_url

__all__ = ["StylesheetFetcher"]

logger = logging.getLogger("csstrim")


class StylesheetFetcher:
    """Fetch text from URLs with :mod:`httpx` and from local files.

    Any failure raises :class:`FetchError` carrying the location.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = "csstrim",
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._headers = {"User-Agent": user_agent, **(headers or {})}
        self._transport = transport

    async def _get(self, url: str) -> str:
        try:
            async with httpx.AsyncClient(
                headers=self._headers,
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                resp = await client.get(url)
        except httpx.TimeoutException as exc:
            raise FetchError(f"Timed out fetching {url}", location=url, cause=exc) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Could not fetch {url}: {exc}", location=url, cause=exc) from exc

        if resp.status_code >= 400:
            raise FetchError(
                f"Could not fetch {url}: HTTP {resp.status_code}",
                location=url,
                status_code=resp.status_code,
            )
        return resp.text

    @staticmethod
    def _read(location: str) -> str:
        path = Path(location)
        if not path.is_file():
            raise FetchError(
                f"Could not open {os.path.abspath(location)}", location=location
            )
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FetchError(
                f"Could not read {location}: {exc}", location=location, cause=exc
            ) from exc

    async def fetch(self, location: str) -> str:
        """Return the text at *location*."""
        logger.debug("Fetching %s", location)
        if is_url(location):
            return await self._get(location)
        return self._read(location)

    async def fetch_all(self, locations: list[str]) -> list[str]:
        """Fetch every location concurrently; fails as a whole on the first error."""
        return await gather_all([self.fetch(loc) for loc in locations])

    async def load_document(self, location: str) -> Document:
        return Document(location=location, html=await self.fetch(location))
