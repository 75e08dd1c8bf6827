"""Retrieval of the full index page of a documentation root.

The page is read over HTTP for websites, from the zip entry for archive
roots, and from disk otherwise. Blocking reads run in worker threads so
that many roots can be fetched concurrently from the event loop.
"""

import asyncio
import zipfile

import httpx
from loguru import logger

from docseek.config import settings
from docseek.errors import FetchError
from docseek.uris import (
    file_uri_to_path,
    full_index_uri,
    is_archive_uri,
    links_to_website,
    split_archive_uri,
)


async def _fetch_from_website(uri: str, timeout: float) -> str:
    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            resp = await client.get(uri)
            resp.raise_for_status()
            return resp.text
    except httpx.TimeoutException as e:
        raise FetchError(uri, f"timed out after {timeout}s") from e
    except httpx.HTTPStatusError as e:
        raise FetchError(uri, f"HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise FetchError(uri, str(e) or type(e).__name__) from e


def _read_from_archive(uri: str) -> str:
    try:
        archive_path, entry = split_archive_uri(uri)
    except ValueError as e:
        raise FetchError(uri, str(e)) from e

    try:
        with zipfile.ZipFile(archive_path) as archive:
            try:
                data = archive.read(entry)
            except KeyError as e:
                raise FetchError(uri, f"{entry} not found in {archive_path}") from e
    except (OSError, zipfile.BadZipFile) as e:
        raise FetchError(uri, f"cannot read {archive_path}: {e}") from e
    return data.decode("utf-8", errors="replace")


def _read_from_file(uri: str) -> str:
    try:
        path = file_uri_to_path(uri)
        with path.open(encoding="utf-8", errors="replace") as f:
            return "\n".join(line.rstrip("\r\n") for line in f)
    except (OSError, ValueError) as e:
        raise FetchError(uri, str(e)) from e


async def fetch_index_page(root: str, timeout: float | None = None) -> str:
    """Return the text of the full index page of the tree at *root*.

    Args:
        root: Documentation root URI (file, jar or http/https).
        timeout: Timeout for website roots in seconds
            (default: settings.fetch_timeout).

    Raises:
        FetchError: if the page cannot be retrieved. The cause is chained.
    """
    uri = full_index_uri(root)
    logger.debug(f"Fetching index page {uri}")

    if links_to_website(uri):
        if timeout is None:
            timeout = settings.fetch_timeout
        return await _fetch_from_website(uri, timeout)
    if is_archive_uri(uri):
        return await asyncio.to_thread(_read_from_archive, uri)
    return await asyncio.to_thread(_read_from_file, uri)
