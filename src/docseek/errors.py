"""Exceptions raised by docseek."""


class DocseekError(Exception):
    """Base class for docseek errors."""


class DiscoveryError(DocseekError):
    """A seed could not be turned into candidate documentation roots."""

    def __init__(self, seed: str, reason: str):
        self.seed = seed
        self.reason = reason
        super().__init__(f"Cannot search {seed}: {reason}")


class FetchError(DocseekError):
    """The full index page of a documentation root could not be retrieved.

    The underlying exception, when there is one, is available as
    ``__cause__``.
    """

    def __init__(self, uri: str, reason: str):
        self.uri = uri
        self.reason = reason
        super().__init__(f"Cannot fetch {uri}: {reason}")
