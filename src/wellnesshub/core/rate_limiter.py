"""
In-memory fixed-window rate limiting.

The limiter is an explicit object: the application builds one at startup
and keeps it on ``app.state``; nothing here is module-level state.
"""

import logging
import time
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Dict, Optional

from .config import RateLimitSettings

logger = logging.getLogger(__name__)

CLEANUP_INTERVAL_SECONDS = 60


@dataclass
class RateLimitResult:
    allowed: bool
    remaining: int
    retry_after: float = 0.0


class RateLimiter:
    """Allows ``points`` hits per key in each ``duration_seconds`` window."""

    def __init__(self, points: int = 10, duration_seconds: int = 60, clock: Optional[Callable[[], float]] = None):
        if points < 1 or duration_seconds < 1:
            raise ValueError("points and duration_seconds must be positive")
        self.points = points
        self.duration_seconds = duration_seconds
        self._clock = clock or time.monotonic
        # {key: [count, reset_time]}
        self._windows: Dict[str, list] = {}
        self._lock = Lock()
        self._last_cleanup = self._clock()

    @classmethod
    def from_settings(cls, settings: RateLimitSettings) -> "RateLimiter":
        return cls(points=settings.points, duration_seconds=settings.duration_seconds)

    def hit(self, key: str) -> RateLimitResult:
        """Consume one point for ``key``."""
        now = self._clock()
        with self._lock:
            self._cleanup(now)
            window = self._windows.get(key)
            if window is None or now >= window[1]:
                window = [0, now + self.duration_seconds]
                self._windows[key] = window

            if window[0] >= self.points:
                retry_after = max(window[1] - now, 0.0)
                logger.warning(f"Rate limit exceeded for {key}; retry after {retry_after:.1f}s")
                return RateLimitResult(allowed=False, remaining=0, retry_after=retry_after)

            window[0] += 1
            return RateLimitResult(allowed=True, remaining=self.points - window[0])

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()

    def _cleanup(self, now: float) -> None:
        """Drop expired windows; caller holds the lock."""
        if now - self._last_cleanup < CLEANUP_INTERVAL_SECONDS:
            return
        expired = [k for k, (_, reset_time) in self._windows.items() if now >= reset_time]
        for k in expired:
            del self._windows[k]
        if expired:
            logger.debug(f"Cleaned up {len(expired)} expired rate limit entries")
        self._last_cleanup = now
