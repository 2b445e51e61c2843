from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Protocol

from mapcrawl.domain.fetched_page import FetchedPage
from mapcrawl.exceptions import FetchFailedError
from mapcrawl.services.link_extractor import LinkExtractor
from mapcrawl.services.link_normalizer import LinkNormalizer

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Fetch a URL and return the normalized child URLs found on the page.

    Implementations raise `FetchFailedError` when the page cannot be
    retrieved; the scheduler records that URL as failed and moves on.
    """

    def fetch(self, url: str) -> List[str]: ...


class LinkFetcher:
    """Retrying fetcher backed by `HttpService`.

    Retries every error up to `max_retries` extra times with a fixed
    `retry_delay` between attempts, then parses anchors out of the body and
    normalizes them against the crawl's base host.
    """

    def __init__(
        self,
        http_service,
        normalizer: LinkNormalizer,
        extractor: Optional[LinkExtractor] = None,
        *,
        max_retries: int = 3,
        retry_delay: float = 0.1,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self.http_service = http_service
        self.normalizer = normalizer
        self.extractor = extractor or LinkExtractor()
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self._sleep = sleep

    def _fetch_with_retries(self, url: str) -> FetchedPage:
        attempts = self.max_retries + 1
        last_error: Optional[Exception] = None
        for attempt in range(1, attempts + 1):
            try:
                return self.http_service.get(url)
            except Exception as e:
                last_error = e
                logger.warning("Fetch attempt %s/%s failed for %s: %s", attempt, attempts, url, e)
            if attempt < attempts:
                self._sleep(self.retry_delay)
        raise FetchFailedError(url, attempts, last_error) from last_error

    def fetch(self, url: str) -> List[str]:
        page = self._fetch_with_retries(url)

        if not page.ok:
            logger.warning("Non-success status for %s: %s", url, page.status_code)

        if not page.is_html:
            logger.debug("Skipping link extraction for %s (content type %s)", url, page.content_type)
            return []

        hrefs = self.extractor.extract_hrefs(page.body or "")
        return self.normalizer.normalize_all(hrefs, url)
