"""Data records shared by discovery, indexing and search."""

from dataclasses import dataclass, field
from enum import StrEnum

from docseek.uris import display_name


class Category(StrEnum):
    """Closed vocabulary of element categories found in index pages.

    The value is the first word of the label following an index entry
    (``Static method in class ...`` gives ``Static``).
    """

    CLASS = "Class"
    INTERFACE = "Interface"
    ENUM = "Enum"
    CONSTRUCTOR = "Constructor"
    STATIC = "Static"
    METHOD = "Method"
    VARIABLE = "Variable"
    EXCEPTION = "Exception"
    ANNOTATION = "Annotation"
    ELEMENT = "Element"
    PACKAGE = "package"
    MODULE = "module"

    @classmethod
    def lookup(cls, label: str) -> "Category | None":
        """Return the category named *label*, or None for unknown labels."""
        try:
            return cls(label)
        except ValueError:
            return None


@dataclass(frozen=True)
class Element:
    """One documented symbol.

    Attributes:
        uri: Absolute URI of the detail page.
        name: Display name, e.g. ``Foo.bar(int)``.
        category: Category label as found in the index page.
    """

    uri: str
    name: str
    category: str


@dataclass(frozen=True)
class DocumentationSource:
    """A documentation tree and the elements parsed from its full index.

    Two sources are equal when their roots are equal, whatever elements
    they hold.
    """

    root: str
    elements: tuple[Element, ...] = field(default=(), compare=False)

    @property
    def name(self) -> str:
        return display_name(self.root)


def sort_sources(sources: list[DocumentationSource]) -> list[DocumentationSource]:
    """Return *sources* ordered by display name."""
    return sorted(sources, key=lambda source: source.name)


def default_source(
    sources: list[DocumentationSource], preferred: str = ""
) -> DocumentationSource | None:
    """Pick the source to show first.

    The first source whose display name contains *preferred*
    (case-insensitive) wins, otherwise the first source. None when
    *sources* is empty.
    """
    if not sources:
        return None
    if preferred:
        wanted = preferred.lower()
        for source in sources:
            if wanted in source.name.lower():
                return source
    return sources[0]
