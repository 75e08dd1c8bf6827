"""docseek - discovery, indexing and incremental search of API documentation."""

from importlib.metadata import version

from docseek.__main__ import _cli as main
from docseek.documentation import build_sources
from docseek.models import Category, DocumentationSource, Element
from docseek.search import SearchEntry, SearchIndex, query

__version__ = version("docseek")
__all__ = [
    "Category",
    "DocumentationSource",
    "Element",
    "SearchEntry",
    "SearchIndex",
    "build_sources",
    "query",
    "main",
    "__version__",
]
