from typing import Optional

from mapcrawl.domain.adjacency_store import AdjacencyStore
from mapcrawl.domain.state_store import CrawlStateStore
from mapcrawl.utils.url_utils import has_host, normalize_address


class CrawlContext:
    def __init__(
        self,
        seed: str,
        max_depth: int,
        state_store: Optional[CrawlStateStore] = None,
        adjacency_store: Optional[AdjacencyStore] = None,
    ):
        if not seed or not has_host(seed):
            raise ValueError(f"seed must be an absolute http(s) URL: {seed!r}")
        if max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        # the raw seed is the base for host filtering; the normalized one is the crawl key
        self.base_url = seed
        self.seed = normalize_address(seed)
        self.max_depth = max_depth
        # both stores belong to this run only; workers reach them through the context
        self.state_store = state_store if state_store is not None else CrawlStateStore()
        self.adjacency_store = adjacency_store if adjacency_store is not None else AdjacencyStore()

    def __repr__(self):
        return f"<CrawlContext seed={self.seed} max_depth={self.max_depth} claimed={len(self.state_store)}>"
