import argparse
import logging
import time
from pathlib import Path
from typing import Optional, Sequence

from mapcrawl import config
from mapcrawl.container import Container
from mapcrawl.domain.crawl_context import CrawlContext
from mapcrawl.exceptions import OutputWriteError
from mapcrawl.services.site_map_renderer import SiteMapRenderer
from mapcrawl.utils.url_utils import has_host

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mapcrawl",
        description="Crawl a site from a seed URL and write an indented site map.",
    )
    parser.add_argument("-url", "--url", default=config.DEFAULT_URL, help="site to crawl")
    parser.add_argument("-depth", "--depth", type=int, default=config.DEFAULT_DEPTH, help="maximum depth to crawl upto")
    parser.add_argument("-output", "--output", default=config.OUTPUT_FILE, help="file to write the sitemap to")
    parser.add_argument("-workers", "--workers", type=int, default=None, help="number of concurrent fetch workers")
    parser.add_argument("-retries", "--retries", type=int, default=None, help="extra attempts per page after a failure")
    parser.add_argument("-log-level", "--log-level", default=config.LOG_LEVEL, help="logging level (DEBUG, INFO, ...)")
    return parser


def write_site_map(path: str, text: str) -> None:
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(path, e) from e


def main(argv: Optional[Sequence[str]] = None, container: Optional[Container] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not has_host(args.url):
        parser.error(f"-url must be an absolute http(s) URL, got {args.url!r}")
    if args.depth < 0:
        parser.error("-depth must be >= 0")
    if args.workers is not None and args.workers < 1:
        parser.error("-workers must be >= 1")
    if args.retries is not None and args.retries < 0:
        parser.error("-retries must be >= 0")

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        container = Container()
    if args.workers is not None:
        container.config.MAPCRAWL_MAX_WORKERS.from_value(args.workers)
    if args.retries is not None:
        container.config.MAPCRAWL_MAX_RETRIES.from_value(args.retries)

    scheduler = container.crawl_scheduler()
    context = CrawlContext(args.url, args.depth)

    result = scheduler.crawl(context)
    print(f"Crawler took: {result.elapsed_seconds:.6f}s")

    metrics = result.metrics
    print(f"\nMetric aggregation took: {result.aggregation_seconds:.6f}s")
    print(f"Stats: LOADED = {metrics.completed} LOADING = {metrics.in_flight} ERROR = {metrics.failed}")

    start = time.perf_counter()
    site_map = SiteMapRenderer(context.adjacency_store).render(context.seed, args.depth, 1)
    try:
        write_site_map(args.output, site_map)
    except OutputWriteError as e:
        logger.error("%s", e)
        print(f"\nCannot write to the output file {args.output}")
    else:
        print(f"\nWriting the url sitemap tree structure took: {time.perf_counter() - start:.6f}s")

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
