# catalog_api/rate_limit.py
"""
Fixed-window request counter.

Every call to ``allow()`` counts one request. Once more than
``max_requests`` calls land in the current window, ``allow()`` returns
``False`` until the window ends and the counter starts again from
zero. The clock is injectable so tests can move time forward by hand.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable

from .config import RATE_LIMIT_MAX_REQUESTS, RATE_LIMIT_WINDOW_SECONDS


logger = logging.getLogger(__name__)


class FixedWindowRateLimiter:
    def __init__(
        self,
        max_requests: int = RATE_LIMIT_MAX_REQUESTS,
        window_seconds: float = RATE_LIMIT_WINDOW_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_requests < 0:
            raise ValueError("max_requests must be >= 0")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be > 0")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        # Sync endpoints run in a threadpool; the counter needs a lock.
        self._lock = threading.Lock()
        self._window_start = clock()
        self._count = 0

    def _roll_window(self, now: float) -> None:
        elapsed = now - self._window_start
        if elapsed < self.window_seconds:
            return
        # Windows are aligned to the first one, like a periodic timer.
        self._window_start += (elapsed // self.window_seconds) * self.window_seconds
        if self._count > self.max_requests:
            logger.info(
                "Rate limit window reset after %d requests (limit %d)",
                self._count,
                self.max_requests,
            )
        self._count = 0

    def allow(self) -> bool:
        """Count one request; return ``False`` if it is over the limit."""
        with self._lock:
            self._roll_window(self._clock())
            self._count += 1
            count = self._count
        if count > self.max_requests:
            if count == self.max_requests + 1:
                logger.warning("Request limit of %d reached, rejecting until the window resets", self.max_requests)
            return False
        return True

    def reset(self) -> None:
        """Start a fresh window immediately."""
        with self._lock:
            self._window_start = self._clock()
            self._count = 0


# Process-wide limiter used by the API.
rate_limiter = FixedWindowRateLimiter()


def get_rate_limiter() -> FixedWindowRateLimiter:
    """FastAPI dependency returning the process-wide limiter."""
    return rate_limiter
