"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from mapcrawl import config as env
from mapcrawl.services.crawl_scheduler import CrawlScheduler
from mapcrawl.services.fetcher_factory import FetcherFactory
from mapcrawl.services.http_service import HttpService
from mapcrawl.services.link_extractor import LinkExtractor


# Environment variables used by the container (read via `mapcrawl.config` helpers).
#
# USER_AGENT (str, default: "MapCrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for each outbound HTTP request.
#
# MAPCRAWL_MAX_RETRIES (int, default: 3)
#   Extra attempts after the first failed fetch of a page.
#
# MAPCRAWL_RETRY_DELAY (float seconds, default: 0.1)
#   Fixed pause between fetch attempts.
#
# MAPCRAWL_MAX_WORKERS (int, default: 16)
#   Size of the worker pool; upper bound on concurrent fetches.
ENV = {
    "USER_AGENT": env.USER_AGENT,
    "HTTP_TIMEOUT": env.HTTP_TIMEOUT,
    "MAPCRAWL_MAX_RETRIES": env.MAX_RETRIES,
    "MAPCRAWL_RETRY_DELAY": env.RETRY_DELAY,
    "MAPCRAWL_MAX_WORKERS": env.MAX_WORKERS,
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for MapCrawl."""

    # Configuration
    config = providers.Configuration(default=ENV)

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    link_extractor = providers.Singleton(
        LinkExtractor
    )

    fetcher_factory = providers.Singleton(
        FetcherFactory,
        http_service=http_service,
        max_retries=config.MAPCRAWL_MAX_RETRIES.as_(int),
        retry_delay=config.MAPCRAWL_RETRY_DELAY.as_(float),
        extractor=link_extractor,
    )

    # Factory: each run gets its own scheduler (and worker pool)
    crawl_scheduler = providers.Factory(
        CrawlScheduler,
        fetcher_factory=fetcher_factory,
        max_workers=config.MAPCRAWL_MAX_WORKERS.as_(int),
    )
