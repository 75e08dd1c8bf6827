"""Parsing of generated full index pages into elements.

Each ``<dt>`` fragment of the page describes one element::

    <dt><a href="../pkg/Foo.html#bar(int)" class="member-name-link">bar(int)</a>
     - Method in class pkg.<a href="../pkg/Foo.html">Foo</a></dt>

The first anchor gives the link and the name, the optional second anchor the
qualifier (``Foo.bar(int)``), and the word after ``</a> - `` the category.
Fragments that do not match are skipped.
"""

import re

from loguru import logger

from docseek.models import Category, Element
from docseek.uris import is_valid_uri

_ENTRY_RE = re.compile(r"<dt>(.*?)</dt>", re.DOTALL)
_LINK_RE = re.compile(r'href="(.+?)"')
_NAME_RE = re.compile(r"<a .*?>(?:<span .*?>)?(.*?)(?:</span>)?</a>", re.DOTALL)
_CATEGORY_RE = re.compile(r"</a> - ([^\s<]+)")


def _unescape(name: str) -> str:
    return name.replace("&lt;", "<").replace("&gt;", ">")


def strip_constructor_qualifier(name: str) -> str:
    """Turn ``Foo.Foo(int)`` into ``Foo(int)``.

    Only the part before the parameter list is searched for a qualifier.
    """
    head = name.split("(", 1)[0]
    dot = head.find(".")
    return name if dot == -1 else name[dot + 1 :]


def _parse_fragment(base_uri: str, fragment: str) -> Element | None:
    link = _LINK_RE.search(fragment)
    names = _NAME_RE.findall(fragment)
    category = _CATEGORY_RE.search(fragment)
    if link is None or not names or category is None:
        return None

    name = names[0]
    if len(names) > 1:
        name = f"{names[1]}.{name}"
    name = _unescape(name)

    uri = base_uri + link.group(1)
    if not is_valid_uri(uri):
        logger.debug(f"Cannot create URI {uri} of documentation element")
        return None

    label = category.group(1)
    if Category.lookup(label) is Category.CONSTRUCTOR:
        name = strip_constructor_qualifier(name)
    return Element(uri=uri, name=name, category=label)


def parse_index_page(base_uri: str, page: str) -> list[Element]:
    """Extract the elements listed on a full index page.

    Args:
        base_uri: URI the relative links of the page are resolved against.
            It is prepended as is, so it should end with '/'.
        page: HTML text of the full index page.

    Returns:
        Elements in page order. Malformed fragments are left out.
    """
    elements = []
    for match in _ENTRY_RE.finditer(page):
        element = _parse_fragment(base_uri, match.group(1))
        if element is not None:
            elements.append(element)
    return elements
