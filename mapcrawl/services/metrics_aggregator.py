from typing import Mapping

from mapcrawl.domain.crawl_result import CrawlMetrics
from mapcrawl.domain.crawl_state import CrawlState


def aggregate(snapshot: Mapping[str, CrawlState]) -> CrawlMetrics:
    """Count URLs per crawl state in a state snapshot."""
    completed = in_flight = failed = 0
    for state in snapshot.values():
        if state == CrawlState.COMPLETED:
            completed += 1
        elif state == CrawlState.IN_FLIGHT:
            in_flight += 1
        elif state == CrawlState.FAILED:
            failed += 1
    return CrawlMetrics(completed=completed, in_flight=in_flight, failed=failed)
