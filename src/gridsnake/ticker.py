from typing import Optional


class Ticker:
    """
    Periodic tick source polled from the main loop.

    Time-gated like the game loop: a tick is due once `interval_ms` has
    passed since the previous one. Holds at most one schedule; arming again
    replaces it, and cancelling an idle ticker does nothing.
    """

    def __init__(self):
        self.interval_ms: Optional[int] = None
        self._last_ms: Optional[int] = None

    @property
    def armed(self) -> bool:
        return self.interval_ms is not None

    def arm(self, interval_ms: int, now_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.cancel()
        self.interval_ms = interval_ms
        self._last_ms = now_ms

    def cancel(self) -> None:
        self.interval_ms = None
        self._last_ms = None

    def poll(self, now_ms: int) -> int:
        """Number of ticks that came due since the last poll."""
        if not self.armed:
            return 0
        elapsed = now_ms - self._last_ms
        if elapsed < self.interval_ms:
            return 0
        due = elapsed // self.interval_ms
        self._last_ms += due * self.interval_ms
        return due

    def __repr__(self):
        return f"<Ticker interval_ms={self.interval_ms}>"
