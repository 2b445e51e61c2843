"""Crawl result data models."""
from typing import NamedTuple


class CrawlMetrics(NamedTuple):
    """Per-state URL counts taken from a state snapshot."""

    completed: int
    in_flight: int
    failed: int


class CrawlResult(NamedTuple):
    """Result of a crawl operation.

    Gives the caller enough to report on a finished run without touching
    the stores directly.
    """
    seed: str
    """Normalized seed URL the crawl started from"""

    max_depth: int
    """Depth limit used for traversal (and for rendering)"""

    metrics: CrawlMetrics
    """Counts per crawl state once every unit of work has finished"""

    elapsed_seconds: float
    """Wall-clock time spent crawling, excluding aggregation"""

    aggregation_seconds: float = 0.0
    """Time spent counting states for `metrics`"""
