"""Pytest configuration and fixtures."""

import zipfile
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

INDEX_PAGE_HTML = """<!DOCTYPE HTML>
<html lang="en">
<head>
<!-- Generated by javadoc (21) -->
<title>Overview</title>
</head>
<body class="index-redirect-page"></body>
</html>
"""

INDEX_ALL_HTML = """<!DOCTYPE HTML>
<html lang="en">
<body class="index-page">
<dl class="index">
<dt><a href="pkg/Foo.html" class="type-name-link" title="class in pkg">Foo</a> - Class in <a href="pkg/package-summary.html">pkg</a></dt>
<dd>&nbsp;</dd>
<dt><a href="pkg/Foo.html#%3Cinit%3E(int)" class="member-name-link">Foo(int)</a> - Constructor for class pkg.<a href="pkg/Foo.html" title="class in pkg">Foo</a></dt>
<dd>&nbsp;</dd>
<dt><a href="pkg/Foo.html#getBar()" class="member-name-link">getBar()</a> - Method in class pkg.<a href="pkg/Foo.html" title="class in pkg">Foo</a></dt>
<dd>&nbsp;</dd>
<dt><a href="pkg/package-summary.html">pkg</a> - package pkg</dt>
</dl>
</body>
</html>
"""


def write_javadoc_tree(directory: Path) -> Path:
    """Write a minimal generated documentation tree, return its index page."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "index.html").write_text(INDEX_PAGE_HTML)
    (directory / "index-all.html").write_text(INDEX_ALL_HTML)
    return directory / "index.html"


def write_javadoc_archive(path: Path, with_index: bool = True) -> Path:
    """Write a documentation archive at *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as archive:
        if with_index:
            archive.writestr("index.html", INDEX_PAGE_HTML)
            archive.writestr("index-all.html", INDEX_ALL_HTML)
        archive.writestr("pkg/Foo.html", "<html></html>")
    return path


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Project holding a javadoc directory (depth 4) and a javadoc jar (depth 2)."""
    project = tmp_path / "project"
    write_javadoc_tree(project / "build" / "docs" / "javadoc")
    write_javadoc_archive(project / "libs" / "mylib-1.0-javadoc.jar")
    # Noise that must not be picked up
    (project / "src").mkdir()
    (project / "src" / "index.html").write_text(INDEX_PAGE_HTML)
    write_javadoc_archive(project / "libs" / "mylib-1.0.jar")
    return project


@pytest.fixture
def mock_http_client():
    """Create a mock httpx.AsyncClient usable as an async context manager.

    Example usage::

        with patch(
            "docseek.sources.fetcher.httpx.AsyncClient",
            return_value=mock_http_client,
        ):
            page = await fetch_index_page("https://example.com/api/index.html")
    """
    response = MagicMock()
    response.status_code = 200
    response.text = INDEX_ALL_HTML

    client = AsyncMock()
    client.get = AsyncMock(return_value=response)
    client.__aenter__.return_value = client
    client.__aexit__.return_value = None
    return client


@pytest.fixture
def index_all_html() -> str:
    return INDEX_ALL_HTML


@pytest.fixture
def make_tree():
    return write_javadoc_tree


@pytest.fixture
def make_archive():
    return write_javadoc_archive
