import threading
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple


class AdjacencyStore:
    """Thread-safe, write-once map of URL -> child URLs in discovery order.

    Only the unit of work that claimed and fetched a URL records its
    children, so a second `record` for the same URL is a programming error.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._children: Dict[str, Tuple[str, ...]] = {}

    def record(self, url: str, children: Iterable[str]) -> None:
        entry = tuple(children)
        with self._lock:
            if url in self._children:
                raise ValueError(f"children already recorded for {url}")
            self._children[url] = entry

    def children(self, url: str) -> Optional[Tuple[str, ...]]:
        with self._lock:
            return self._children.get(url)

    def snapshot(self) -> Mapping[str, Tuple[str, ...]]:
        with self._lock:
            return MappingProxyType(dict(self._children))

    def clear(self) -> None:
        with self._lock:
            self._children.clear()

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._children

    def __len__(self) -> int:
        with self._lock:
            return len(self._children)
