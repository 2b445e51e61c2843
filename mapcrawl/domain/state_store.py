import threading
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from mapcrawl.domain.crawl_state import CrawlState


class CrawlStateStore:
    """
    Tracks the crawl state of every URL claimed during a crawl.

    Shared by all worker threads of a single crawl. Every method takes the
    store lock, so callers never read-modify-write the underlying dict
    themselves. `try_claim` is the only way a URL leaves the untouched
    state and guarantees that at most one caller ever wins a given URL.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._states: Dict[str, CrawlState] = {}

    def try_claim(self, url: str) -> bool:
        """Mark `url` in-flight if it has no state yet.

        Returns True if the caller now owns the fetch for `url`, False if
        another caller claimed it first (no mutation in that case).
        """
        with self._lock:
            if url in self._states:
                return False
            self._states[url] = CrawlState.IN_FLIGHT
            return True

    def set_state(self, url: str, state: CrawlState) -> None:
        """Overwrite the state of a claimed URL."""
        with self._lock:
            self._states[url] = CrawlState(state)

    def get_state(self, url: str) -> Optional[CrawlState]:
        with self._lock:
            return self._states.get(url)

    def snapshot(self) -> Mapping[str, CrawlState]:
        """Return a read-only copy of all states."""
        with self._lock:
            return MappingProxyType(dict(self._states))

    def clear(self) -> None:
        """Forget every state. Only meant for reuse between independent runs."""
        with self._lock:
            self._states.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)
