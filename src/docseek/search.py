"""Incremental search over the elements of documentation sources.

Every element is registered as a :class:`SearchEntry` carrying a searchable
key, the part of its name a user is likely to type:

- classes and interfaces: the simple name (``pkg.Foo`` -> ``Foo``)
- enums: the last two segments (``Color.RED``)
- constructors and methods: the bare member name (``Foo.bar(int)`` -> ``bar``)
- anything else: the full name

Queries keep the entries whose key contains the query (ignoring case),
ranked by category precedence then name, and bounded in number.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from loguru import logger

from docseek.config import settings
from docseek.models import Category, DocumentationSource, Element


def _simple_name(name: str) -> str:
    return name[name.rfind(".") + 1 :]


def _last_two_segments(name: str) -> str:
    return ".".join(name.split(".")[-2:])


def _member_name(name: str) -> str:
    head = name.split("(", 1)[0]
    return head[head.find(".") + 1 :]


# Categories missing here use the full name
_KEY_FUNCTIONS: dict[Category, Callable[[str], str]] = {
    Category.CLASS: _simple_name,
    Category.INTERFACE: _simple_name,
    Category.ENUM: _last_two_segments,
    Category.CONSTRUCTOR: _member_name,
    Category.STATIC: _member_name,
    Category.METHOD: _member_name,
}

_PRECEDENCE: dict[Category, int] = {
    Category.CLASS: 0,
    Category.INTERFACE: 1,
    Category.ENUM: 2,
    Category.CONSTRUCTOR: 3,
    Category.STATIC: 4,
    Category.METHOD: 5,
}
_UNRANKED = len(_PRECEDENCE)


def searchable_key(name: str, category: str) -> str:
    """Return the part of *name* matched against queries."""
    key_function = _KEY_FUNCTIONS.get(Category.lookup(category))
    return key_function(name) if key_function else name


def precedence(category: str) -> int:
    """Rank of *category* in results, lower first."""
    return _PRECEDENCE.get(Category.lookup(category), _UNRANKED)


@dataclass(frozen=True)
class SearchEntry:
    """An element offered by incremental search.

    Attributes:
        element: The documented element.
        on_selected: Called without arguments when the user picks the entry.
        searchable_key: Derived from the element name and category.
    """

    element: Element
    on_selected: Callable[[], object] = field(compare=False)
    searchable_key: str = field(init=False)

    def __post_init__(self):
        if not callable(self.on_selected):
            raise TypeError("on_selected must be callable")
        object.__setattr__(
            self,
            "searchable_key",
            searchable_key(self.element.name, self.element.category),
        )

    @property
    def name(self) -> str:
        return self.element.name

    @property
    def category(self) -> str:
        return self.element.category

    def select(self) -> None:
        self.on_selected()


def rank_key(entry: SearchEntry) -> tuple[int, str]:
    return precedence(entry.category), entry.name


def query(entries: list[SearchEntry], text: str, max_results: int) -> list[SearchEntry]:
    """Return the best *max_results* entries matching *text*.

    Entries match when their searchable key contains *text*, ignoring case.
    Matches are ordered by category precedence, then by name
    (case-sensitive), and only the first *max_results* are kept.

    Raises:
        ValueError: if max_results is negative.
    """
    if max_results < 0:
        raise ValueError(f"max_results must not be negative, got {max_results}")
    if not text:
        return []

    lowered = text.lower()
    matches = [entry for entry in entries if lowered in entry.searchable_key.lower()]
    return sorted(matches, key=rank_key)[:max_results]


def group_by_category(
    entries: list[SearchEntry],
) -> list[tuple[str, list[SearchEntry]]]:
    """Group *entries* by category, keeping their order.

    Categories appear in the order of their first entry.
    """
    groups: dict[str, list[SearchEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.category, []).append(entry)
    return list(groups.items())


def highlight(entry: SearchEntry, text: str) -> tuple[str, str, str]:
    """Split the entry name around the part matching *text*.

    The match is looked for from the position of the searchable key in the
    name, so that ``Foo.bar`` highlights ``bar`` for the query ``ba``
    rather than an earlier occurrence in the qualifier.

    Returns:
        ``(before, match, after)``; ``(name, "", "")`` when nothing matches.
    """
    name = entry.name
    start = max(name.find(entry.searchable_key), 0)
    index = name.lower().find(text.lower(), start) if text else -1
    if index == -1:
        return name, "", ""
    end = index + len(text)
    return name[:index], name[index:end], name[end:]


class SearchIndex:
    """Entries of all documentation sources of a session.

    Sources are added once discovery has completed; queries only read the
    entries afterwards.
    """

    def __init__(
        self,
        max_results: int | None = None,
        skip_categories: list[str] | None = None,
    ):
        self.max_results = settings.max_results if max_results is None else max_results
        if self.max_results < 0:
            raise ValueError(f"max_results must not be negative, got {self.max_results}")
        if skip_categories is None:
            skip_categories = settings.skip_categories
        self._skip_categories = frozenset(skip_categories)
        self._entries: list[SearchEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> list[SearchEntry]:
        return list(self._entries)

    def add_sources(
        self,
        sources: list[DocumentationSource],
        on_selected: Callable[[Element], Callable[[], object]],
    ) -> int:
        """Register the elements of *sources*.

        Args:
            sources: Built documentation sources.
            on_selected: Factory returning the selection callback of an
                element, e.g. ``lambda element: lambda: viewer.load(element.uri)``.

        Returns:
            Number of entries added. Elements of skipped categories are not
            registered.
        """
        added = [
            SearchEntry(element=element, on_selected=on_selected(element))
            for source in sources
            for element in source.elements
            if element.category not in self._skip_categories
        ]
        self._entries.extend(added)
        logger.debug(f"Registered {len(added)} search entries from {len(sources)} sources")
        return len(added)

    def query(self, text: str) -> list[tuple[str, list[SearchEntry]]]:
        """Return the ranked entries matching *text*, grouped by category."""
        return group_by_category(query(self._entries, text, self.max_results))
