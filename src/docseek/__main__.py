"""docseek command line entry point."""

import asyncio
import sys

from loguru import logger

_USAGE = """Usage:
  docseek list [SEED...]          List documentation found from the seeds
  docseek search QUERY [SEED...]  Search elements of the documentation found

Seeds are URIs with an explicit scheme, for example
file:///path/to/project, file:///path/to/lib-javadoc.jar or
https://docs.example.org/api/index.html
"""


def _configure_logging() -> None:
    from docseek.config import settings

    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)


def _list(seeds: list[str]) -> int:
    from docseek.documentation import build_sources
    from docseek.models import sort_sources

    sources = sort_sources(asyncio.run(build_sources(seeds)))
    if not sources:
        print("No documentation found.")
        return 1
    for source in sources:
        print(f"{source.name}\t{len(source.elements)} elements\t{source.root}")
    return 0


def _search(text: str, seeds: list[str]) -> int:
    from docseek.documentation import build_sources
    from docseek.search import SearchIndex

    sources = asyncio.run(build_sources(seeds))
    index = SearchIndex()
    index.add_sources(sources, lambda element: lambda: print(element.uri))

    groups = index.query(text)
    if not groups:
        print(f"No match for '{text}'.")
        return 1
    for category, entries in groups:
        print(category)
        for entry in entries:
            print(f"  {entry.name}\t{entry.element.uri}")
    return 0


def _cli() -> None:
    """CLI dispatcher: list or search subcommand."""
    _configure_logging()
    if len(sys.argv) >= 2 and sys.argv[1] == "list":
        sys.exit(_list(sys.argv[2:]))
    elif len(sys.argv) >= 3 and sys.argv[1] == "search":
        sys.exit(_search(sys.argv[2], sys.argv[3:]))
    else:
        print(_USAGE, file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    _cli()
