import threading
import time
from collections import deque
from typing import Deque, Dict


class RateLimiter:
    """Sliding-window limiter keyed by client id."""

    def __init__(self, max_per_minute: int = 60, window_seconds: float = 60.0):
        self.max = max_per_minute
        self.window = window_seconds
        self._lock = threading.Lock()
        self.buckets: Dict[str, Deque[float]] = {}

    def allow(self, key: str) -> bool:
        now = time.monotonic()
        with self._lock:
            bucket = self.buckets.setdefault(key, deque())
            while bucket and now - bucket[0] > self.window:
                bucket.popleft()
            if len(bucket) >= self.max:
                return False
            bucket.append(now)
            return True
