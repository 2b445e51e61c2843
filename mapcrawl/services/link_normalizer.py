import logging
from typing import Iterable, List
from urllib.parse import urljoin, urlparse

from mapcrawl.exceptions import LinkRejectedError
from mapcrawl.utils.url_utils import normalize_address

logger = logging.getLogger(__name__)


class LinkNormalizer:
    """Turns raw `href` values from one page into crawlable same-host URLs.

    The base URL fixes the only host that may be crawled; links are
    resolved against the page they were found on.
    """

    def __init__(self, base_url: str):
        self.base_url = base_url
        self.base_host = urlparse(base_url).netloc.lower()
        if not self.base_host:
            raise ValueError(f"base_url has no host: {base_url!r}")

    def normalize(self, link: str, page_url: str) -> str:
        """Return the normalized absolute URL for `link`, or raise LinkRejectedError."""
        link = (link or "").strip()
        if not link:
            raise LinkRejectedError(link, "empty link")
        if link == page_url:
            raise LinkRejectedError(link, "self-loop")
        if link == "/":
            raise LinkRejectedError(link, "link to site root")
        if link.startswith("#"):
            raise LinkRejectedError(link, "fragment-only link")

        try:
            resolved = urljoin(page_url, link)
            host = urlparse(resolved).netloc.lower()
        except ValueError as e:
            raise LinkRejectedError(link, f"unparsable: {e}") from e

        if host != self.base_host:
            raise LinkRejectedError(link, f"external host {host or '<none>'}")

        normalized = normalize_address(resolved)
        if normalized == normalize_address(page_url):
            raise LinkRejectedError(link, "self-loop")
        return normalized

    def normalize_all(self, links: Iterable[str], page_url: str) -> List[str]:
        """Normalize every link, dropping rejects and keeping the first of any duplicates."""
        seen = set()
        result: List[str] = []
        for link in links:
            try:
                url = self.normalize(link, page_url)
            except LinkRejectedError as e:
                logger.debug("Skipping %s on %s: %s", e.link, page_url, e.reason)
                continue
            if url in seen:
                continue
            seen.add(url)
            result.append(url)
        return result
