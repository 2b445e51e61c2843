import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from mapcrawl.domain.crawl_context import CrawlContext
from mapcrawl.domain.crawl_result import CrawlResult
from mapcrawl.domain.crawl_state import CrawlState
from mapcrawl.exceptions import FetchFailedError
from mapcrawl.services.completion_tracker import CompletionTracker
from mapcrawl.services.fetcher import Fetcher
from mapcrawl.services.fetcher_factory import FetcherFactory
from mapcrawl.services.metrics_aggregator import aggregate

logger = logging.getLogger(__name__)

ScheduleFn = Callable[[str, int], None]


class CrawlScheduler:
    """Executes a depth-limited crawl over a fixed-size worker pool.

    Every discovered child becomes one task on the pool's queue, so
    in-flight fetches never exceed `max_workers`. A `CompletionTracker`
    counts queued and running tasks; `crawl` returns once it drains, at
    which point both stores on the context are stable.
    """

    def __init__(self, *, fetcher_factory: FetcherFactory, max_workers: int = 16):
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self.fetcher_factory = fetcher_factory
        self.max_workers = int(max_workers)

    def crawl(self, context: CrawlContext) -> CrawlResult:
        if context is None:
            raise ValueError("context is required for crawl")

        fetcher = self.fetcher_factory.get(context.base_url)
        tracker = CompletionTracker()
        logger.info("Starting crawl of %s (max depth %s, %s workers)", context.seed, context.max_depth, self.max_workers)
        started = time.monotonic()

        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="mapcrawl") as pool:

            def schedule(url: str, depth: int) -> None:
                # register before submitting so the count cannot touch zero early
                tracker.add()
                try:
                    pool.submit(run_unit, url, depth)
                except Exception:
                    tracker.done()
                    raise

            def run_unit(url: str, depth: int) -> None:
                try:
                    self.crawl_from(url, depth, context, fetcher, schedule)
                except Exception:
                    logger.exception("Unhandled error while crawling %s", url)
                finally:
                    tracker.done()

            schedule(context.seed, context.max_depth)
            tracker.wait()

        elapsed = time.monotonic() - started
        started = time.monotonic()
        metrics = aggregate(context.state_store.snapshot())
        aggregation_seconds = time.monotonic() - started
        logger.info(
            "Crawl of %s finished in %.3fs: completed=%s in_flight=%s failed=%s",
            context.seed,
            elapsed,
            metrics.completed,
            metrics.in_flight,
            metrics.failed,
        )
        return CrawlResult(
            seed=context.seed,
            max_depth=context.max_depth,
            metrics=metrics,
            elapsed_seconds=elapsed,
            aggregation_seconds=aggregation_seconds,
        )

    def crawl_from(self, url: str, depth: int, context: CrawlContext, fetcher: Fetcher, schedule: ScheduleFn) -> bool:
        """Process one URL: claim it, fetch it, record its children and schedule them.

        Returns True if this call fetched `url` successfully.
        """
        if depth <= 0:
            logger.debug("Skipping (max depth reached) %s", url)
            return False
        if not context.state_store.try_claim(url):
            logger.debug("Skipping (already claimed) %s", url)
            return False

        try:
            children = fetcher.fetch(url)
        except FetchFailedError as e:
            logger.warning("Giving up on %s: %s", url, e)
            context.state_store.set_state(url, CrawlState.FAILED)
            return False
        except Exception as e:
            logger.error("Fetch error for %s: %s", url, e, exc_info=True)
            context.state_store.set_state(url, CrawlState.FAILED)
            return False

        context.state_store.set_state(url, CrawlState.COMPLETED)
        context.adjacency_store.record(url, children)
        logger.info("Fetched %s -> %s links", url, len(children))

        for child in children:
            schedule(child, depth - 1)
        return True
