from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

from mapcrawl.services.fetcher import Fetcher, LinkFetcher
from mapcrawl.services.link_extractor import LinkExtractor
from mapcrawl.services.link_normalizer import LinkNormalizer


@dataclass(frozen=True)
class FetcherFactory:
    """Builds a fetcher bound to the base host of one crawl."""

    http_service: object
    max_retries: int = 3
    retry_delay: float = 0.1
    extractor: LinkExtractor = field(default_factory=LinkExtractor)
    sleep: Callable[[float], None] = time.sleep

    def get(self, base_url: str) -> Fetcher:
        if base_url is None or base_url.strip() == "":
            raise ValueError("base_url is required")
        return LinkFetcher(
            self.http_service,
            LinkNormalizer(base_url),
            self.extractor,
            max_retries=self.max_retries,
            retry_delay=self.retry_delay,
            sleep=self.sleep,
        )
