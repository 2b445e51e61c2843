"""Custom exceptions for MapCrawl services."""


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class FetchFailedError(Exception):
    """Raised when every fetch attempt for a URL has failed."""

    def __init__(self, url: str, attempts: int, original: Exception):
        self.url = url
        self.attempts = attempts
        self.original = original
        super().__init__(f"Fetch failed for {url} after {attempts} attempt(s): {original}")


class LinkRejectedError(Exception):
    """Raised when a discovered link is filtered out during normalization."""

    def __init__(self, link: str, reason: str):
        self.link = link
        self.reason = reason
        super().__init__(f"Link {link!r} rejected: {reason}")


class OutputWriteError(Exception):
    """Raised when the rendered site map cannot be written."""

    def __init__(self, path: str, original: Exception):
        self.path = path
        self.original = original
        super().__init__(f"Cannot write site map to {path}: {original}")
