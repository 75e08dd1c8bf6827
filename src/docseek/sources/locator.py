"""Discovery of documentation roots.

Turns seed URIs into candidate documentation roots:

- Website seeds (http/https) and archive seeds (``jar:...!/...``) are kept
  as they are.
- Directory seeds are walked to a bounded depth, testing every file.
- File seeds are tested directly.

A file is a root when it is the ``index.html`` of a generated documentation
directory, or when it is a ``*javadoc.jar`` / ``*javadoc.zip`` archive with
an ``index.html`` entry. Errors never abort discovery: the offending seed or
file is logged and skipped.
"""

import asyncio
import os
import sys
import zipfile
from collections.abc import Iterator
from pathlib import Path

from loguru import logger

from docseek.config import settings
from docseek.errors import DiscoveryError
from docseek.uris import (
    INDEX_PAGE,
    WEBSITE_SCHEMES,
    archive_entry_uri,
    file_uri_to_path,
    is_archive_uri,
    path_to_uri,
    scheme_of,
)

# Names of directories holding a generated index page
_DOC_DIRECTORY_NAMES = ("javadoc", "javadocs", "docs")
# Text present in every generated index page
_INDEX_MARKER = "javadoc"
_ARCHIVE_EXTENSIONS = (".jar", ".zip")
_ARCHIVE_SUFFIX = "javadoc"
# Directories console scripts are installed into inside a virtualenv
_SCRIPT_DIRECTORY_NAMES = ("bin", "Scripts")


def _log_walk_error(error: OSError) -> None:
    logger.debug(f"Error while walking {error.filename}: {error}")


def _walk(directory: Path, depth: int) -> Iterator[Path]:
    """Yield the files of *directory* at most *depth* levels below it."""
    base_depth = len(directory.parts)
    for dirpath, dirnames, filenames in os.walk(directory, onerror=_log_walk_error):
        current = Path(dirpath)
        for filename in filenames:
            yield current / filename
        # Files of sub directories would be deeper than allowed
        if len(current.parts) - base_depth + 1 >= depth:
            dirnames.clear()


def _is_index_page(path: Path) -> bool:
    if path.name.lower() != INDEX_PAGE:
        return False
    if path.parent.name.lower() not in _DOC_DIRECTORY_NAMES:
        return False
    try:
        with path.open(encoding="utf-8", errors="replace") as f:
            return any(_INDEX_MARKER in line for line in f)
    except OSError as e:
        logger.debug(f"Error while reading {path}: {e}")
        return False


def _is_documentation_archive(path: Path) -> bool:
    extension = path.suffix.lower()
    if extension not in _ARCHIVE_EXTENSIONS:
        return False
    if not path.name.lower().endswith(_ARCHIVE_SUFFIX + extension):
        return False
    try:
        with zipfile.ZipFile(path) as archive:
            archive.getinfo(INDEX_PAGE)
    except KeyError:
        logger.debug(f"{INDEX_PAGE} not found in {path}")
        return False
    except (OSError, zipfile.BadZipFile) as e:
        logger.warning(f"Error while reading {path}: {e}")
        return False
    return True


def root_from_file(path: Path) -> str | None:
    """Return the documentation root URI *path* stands for, if any."""
    if _is_index_page(path):
        return path_to_uri(path)
    if _is_documentation_archive(path):
        return archive_entry_uri(path, INDEX_PAGE)
    return None


def find_roots(path: Path, depth: int) -> list[str]:
    """Find documentation roots in or at *path*.

    Directories are walked *depth* levels deep; any other path is tested as
    a single file.
    """
    logger.debug(f"Searching for documentation in {path} (depth={depth})")
    if path.is_dir():
        return [
            root
            for file in _walk(path, depth)
            if (root := root_from_file(file)) is not None
        ]
    root = root_from_file(path)
    return [root] if root is not None else []


def _roots_of_seed(seed: str, depth: int) -> list[str]:
    try:
        scheme = scheme_of(seed)
    except ValueError as e:
        raise DiscoveryError(seed, str(e)) from e
    if scheme in WEBSITE_SCHEMES or is_archive_uri(seed):
        return [seed]
    if scheme != "file":
        raise DiscoveryError(seed, f"unsupported scheme '{scheme}'")
    try:
        path = file_uri_to_path(seed)
    except ValueError as e:
        raise DiscoveryError(seed, str(e)) from e
    if not path.exists():
        raise DiscoveryError(seed, "no such file or directory")
    return find_roots(path, depth)


def locate_seed(seed: str, depth: int | None = None) -> list[str]:
    """Return the candidate documentation roots of a single seed.

    Blocking: walks the file system and opens archives. Never raises for a
    bad seed; the problem is logged and no root is returned.
    """
    if depth is None:
        depth = settings.search_depth
    try:
        return _roots_of_seed(seed, depth)
    except DiscoveryError as e:
        logger.warning(str(e))
    except OSError as e:
        logger.warning(f"Error while searching {seed}: {e}")
    return []


def locate_around_program(program: Path | None = None) -> list[str]:
    """Find documentation roots shipped next to the running program.

    A console script inside a virtualenv (``<project>/.venv/bin/tool``) or a
    program directory triggers a search of the enclosing project three
    levels up. A plain script only has its own directory searched, less
    deeply.
    """
    if program is None:
        if not sys.argv or not sys.argv[0]:
            return []
        program = Path(sys.argv[0])
    try:
        program = program.resolve()
    except OSError as e:
        logger.debug(f"Could not resolve program path {program}: {e}")
        return []

    in_project = program.is_dir() or program.parent.name in _SCRIPT_DIRECTORY_NAMES
    if in_project and len(program.parents) > 2:
        return find_roots(program.parents[2], settings.search_depth)
    return find_roots(program.parent, settings.program_search_depth)


async def locate(
    seeds: list[str],
    depth: int | None = None,
    search_program_dir: bool = False,
) -> list[str]:
    """Find candidate documentation roots for all *seeds*.

    Each seed is searched in a worker thread, all seeds concurrently.
    Duplicates are not removed here.

    Args:
        seeds: Seed URIs with explicit schemes (file, jar, http, https).
        depth: Directory walk depth (default: settings.search_depth).
        search_program_dir: Also search around the running program.

    Returns:
        Candidate root URIs, grouped by seed in seed order.
    """
    tasks = [asyncio.to_thread(locate_seed, seed, depth) for seed in seeds]
    if search_program_dir:
        tasks.append(asyncio.to_thread(locate_around_program))
    results = await asyncio.gather(*tasks)
    roots = [root for seed_roots in results for root in seed_roots]
    logger.debug(f"Found {len(roots)} candidate roots from {len(seeds)} seeds")
    return roots
