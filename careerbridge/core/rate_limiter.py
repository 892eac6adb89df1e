import threading
import time


class InMemoryRateLimiter:
    """
    Fixed-window request counter keyed by caller + path.
    Single-process only; state is lost on restart.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._windows: dict[str, tuple[int, float]] = {}
        self._last_sweep = time.monotonic()

    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._windows)

    def _sweep(self, now: float, window_seconds: int) -> None:
        # At most once per window; drops keys whose window has already closed
        if now - self._last_sweep < window_seconds:
            return
        self._windows = {
            key: (count, started)
            for key, (count, started) in self._windows.items()
            if now - started < window_seconds
        }
        self._last_sweep = now

    def allow(self, key: str, limit: int, window_seconds: int = 60) -> tuple[bool, int]:
        """Returns (allowed, retry_after_seconds)."""
        now = time.monotonic()
        with self._lock:
            self._sweep(now, window_seconds)
            count, started = self._windows.get(key, (0, now))
            if now - started >= window_seconds:
                count, started = 0, now
            if count >= limit:
                return False, max(1, int(window_seconds - (now - started)))
            self._windows[key] = (count + 1, started)
            return True, 0

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()
            self._last_sweep = time.monotonic()


rate_limiter = InMemoryRateLimiter()
