import threading
from typing import Optional


class CompletionTracker:
    """Counting join for units of work spread across worker threads.

    `add()` must be called before a unit is submitted and `done()` exactly
    once when it finishes, on every exit path. `wait()` blocks until the
    pending count drops back to zero.
    """

    def __init__(self):
        self._cond = threading.Condition()
        self._pending = 0

    def add(self, count: int = 1) -> None:
        if count < 0:
            raise ValueError("count must be >= 0")
        with self._cond:
            self._pending += count

    def done(self) -> None:
        with self._cond:
            if self._pending <= 0:
                raise RuntimeError("done() called more times than add()")
            self._pending -= 1
            if self._pending == 0:
                self._cond.notify_all()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until no work is pending. Returns False if `timeout` expired first."""
        with self._cond:
            return self._cond.wait_for(lambda: self._pending == 0, timeout=timeout)

    @property
    def pending(self) -> int:
        with self._cond:
            return self._pending
