"""Helpers for the three kinds of documentation root URIs.

Roots are plain strings with an explicit scheme:

- ``file:///path/to/docs/index.html`` for trees on disk
- ``jar:file:///path/to/lib-javadoc.jar!/index.html`` for trees inside archives
- ``http(s)://host/path/index.html`` for published sites
"""

import re
from pathlib import Path
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

# Structural names of the generated documentation
INDEX_PAGE = "index.html"
INDEX_ALL_PAGE = "index-all.html"

WEBSITE_SCHEMES = ("http", "https")
ARCHIVE_SCHEME = "jar"
# Separates the archive location from the entry path in archive URIs
ARCHIVE_SEPARATOR = "!/"

# Scheme followed by characters allowed in an RFC 3986 URI reference
_URI_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*$")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def scheme_of(uri: str) -> str:
    """Return the lowercased scheme of *uri*, or '' when it has none."""
    return urlparse(uri).scheme.lower()


def links_to_website(uri: str) -> bool:
    """Indicate whether *uri* points to a website."""
    return scheme_of(uri) in WEBSITE_SCHEMES


def is_archive_uri(uri: str) -> bool:
    return scheme_of(uri) == ARCHIVE_SCHEME and ARCHIVE_SEPARATOR in uri


def is_valid_uri(uri: str) -> bool:
    """Check that *uri* is an absolute, syntactically valid URI."""
    return bool(_URI_RE.match(uri)) and not _BAD_ESCAPE_RE.search(uri)


def file_uri_to_path(uri: str) -> Path:
    """Convert a ``file:`` URI to a local path.

    Raises:
        ValueError: if *uri* is not a ``file:`` URI.
    """
    parsed = urlparse(uri)
    if parsed.scheme.lower() != "file":
        raise ValueError(f"Not a file URI: {uri}")
    if parsed.netloc and parsed.netloc != "localhost":
        # UNC-style location (file://server/share/...)
        return Path(url2pathname(f"//{parsed.netloc}{parsed.path}"))
    return Path(url2pathname(parsed.path))


def path_to_uri(path: Path) -> str:
    return path.resolve().as_uri()


def archive_entry_uri(archive: Path, entry: str) -> str:
    """Build the URI of *entry* inside the zip archive at *archive*."""
    return f"{ARCHIVE_SCHEME}:{path_to_uri(archive)}{ARCHIVE_SEPARATOR}{entry}"


def split_archive_uri(uri: str) -> tuple[Path, str]:
    """Split an archive URI into the archive path and the entry name.

    Raises:
        ValueError: if *uri* is not an archive URI or the archive part is
            not a ``file:`` URI.
    """
    if not is_archive_uri(uri):
        raise ValueError(f"Not an archive URI: {uri}")
    rest = uri[len(ARCHIVE_SCHEME) + 1 :]
    index = rest.rfind(ARCHIVE_SEPARATOR)
    return file_uri_to_path(rest[:index]), rest[index + len(ARCHIVE_SEPARATOR) :]


def base_of(uri: str) -> str:
    """Return *uri* cut after its last '/', used to resolve relative links."""
    return uri[: uri.rfind("/") + 1]


def full_index_uri(root: str) -> str:
    """Return the URI of the full index page of the tree at *root*.

    The entry page name is swapped for the full index page name in the
    trailing path segment only.
    """
    base = base_of(root)
    last = root[len(base) :]
    return base + last.replace(INDEX_PAGE, INDEX_ALL_PAGE)


def display_name(root: str) -> str:
    """Return a short human readable name for a documentation root.

    Archive roots are named after the archive file. Roots ending with an
    HTML page are named after the directory holding it.
    """
    if is_archive_uri(root):
        rest = root[len(ARCHIVE_SCHEME) + 1 :]
        archive = rest[: rest.rfind(ARCHIVE_SEPARATOR)]
        segments = [s for s in urlparse(archive).path.split("/") if s]
        return unquote(segments[-1]) if segments else archive

    parsed = urlparse(root)
    segments = [unquote(s) for s in parsed.path.split("/") if s]
    if not segments:
        return parsed.netloc or root
    name = segments[-1].lower()
    if name.endswith(".html") and len(segments) >= 2:
        return segments[-2]
    if name.endswith(".html"):
        return parsed.netloc or name
    return name
