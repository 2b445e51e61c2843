from enum import Enum


class CrawlState(str, Enum):
    """Lifecycle of a claimed URL. Unclaimed URLs have no state at all."""

    IN_FLIGHT = "in_flight"
    COMPLETED = "completed"
    FAILED = "failed"
