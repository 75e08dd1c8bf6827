"""Assembly of documentation sources from seed URIs.

Pipeline: locate candidate roots -> deduplicate -> fetch and parse every
root concurrently -> deduplicate by root. A root that cannot be fetched is
logged and left out; it never fails the whole build.
"""

import asyncio

from loguru import logger

from docseek.config import settings
from docseek.errors import FetchError
from docseek.models import DocumentationSource
from docseek.sources.fetcher import fetch_index_page
from docseek.sources.locator import locate
from docseek.sources.parser import parse_index_page
from docseek.uris import base_of


def _unique(items: list) -> list:
    """Remove duplicates, keeping the first occurrence of each item."""
    return list(dict.fromkeys(items))


async def create_source(
    root: str, timeout: float | None = None
) -> DocumentationSource | None:
    """Fetch and parse the documentation tree at *root*.

    Returns:
        The source, or None when its index page cannot be fetched.
    """
    try:
        page = await fetch_index_page(root, timeout=timeout)
    except FetchError as e:
        logger.warning(f"Skipping documentation at {root}: {e.reason}")
        logger.debug(f"Fetch failure cause: {e.__cause__!r}")
        return None

    elements = parse_index_page(base_of(root), page)
    logger.debug(f"Parsed {len(elements)} elements from {root}")
    return DocumentationSource(root=root, elements=tuple(elements))


async def build_sources(
    seeds: list[str],
    *,
    depth: int | None = None,
    timeout: float | None = None,
    search_program_dir: bool | None = None,
    max_concurrency: int | None = None,
) -> list[DocumentationSource]:
    """Find, fetch and parse all documentation reachable from *seeds*.

    Extra seeds from settings (DOCSEEK_SEEDS) are appended to *seeds*.

    Args:
        seeds: Seed URIs with explicit schemes.
        depth: Directory walk depth (default: settings.search_depth).
        timeout: Website fetch timeout (default: settings.fetch_timeout).
        search_program_dir: Also search around the running program
            (default: settings.search_program_dir).
        max_concurrency: Bound on roots fetched at the same time
            (default: settings.max_concurrent_fetches).

    Returns:
        Sources with distinct roots, in discovery order. Empty when nothing
        was found.

    Raises:
        ValueError: if max_concurrency is lower than 1.
    """
    if search_program_dir is None:
        search_program_dir = settings.search_program_dir
    if max_concurrency is None:
        max_concurrency = settings.max_concurrent_fetches
    if max_concurrency < 1:
        raise ValueError(f"max_concurrency must be at least 1, got {max_concurrency}")

    all_seeds = _unique([*seeds, *settings.get_seeds()])
    roots = _unique(
        await locate(all_seeds, depth=depth, search_program_dir=search_program_dir)
    )
    if not roots:
        logger.info("No documentation found")
        return []

    semaphore = asyncio.Semaphore(max_concurrency)

    async def _bounded(root: str) -> DocumentationSource | None:
        async with semaphore:
            return await create_source(root, timeout=timeout)

    # A cancelled build cancels the pending roots with it
    results = await asyncio.gather(*(_bounded(root) for root in roots))
    sources = _unique([source for source in results if source is not None])
    logger.info(f"Found {len(sources)} documentation sources ({len(roots)} candidates)")
    return sources
