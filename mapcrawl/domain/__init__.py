"""Domain objects for MapCrawl - explicit re-exports to satisfy linters."""
from .adjacency_store import AdjacencyStore as AdjacencyStore
from .crawl_context import CrawlContext as CrawlContext
from .crawl_result import CrawlMetrics as CrawlMetrics
from .crawl_result import CrawlResult as CrawlResult
from .crawl_state import CrawlState as CrawlState
from .fetched_page import FetchedPage as FetchedPage
from .state_store import CrawlStateStore as CrawlStateStore

__all__ = [
    "AdjacencyStore",
    "CrawlContext",
    "CrawlMetrics",
    "CrawlResult",
    "CrawlState",
    "CrawlStateStore",
    "FetchedPage",
]
