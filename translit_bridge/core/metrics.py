import threading
from typing import Dict


class Metrics:
    """In-process request counters, reported by the health endpoint."""

    def __init__(self):
        self._lock = threading.Lock()
        self.requests_total: Dict[str, int] = {}
        self.errors_total: Dict[str, int] = {}
        self.last_latency_ms: Dict[str, float] = {}

    def record(self, route: str, latency_ms: float, failed: bool = False) -> None:
        with self._lock:
            self.requests_total[route] = self.requests_total.get(route, 0) + 1
            if failed:
                self.errors_total[route] = self.errors_total.get(route, 0) + 1
            self.last_latency_ms[route] = round(latency_ms, 2)

    def snapshot(self) -> dict:
        with self._lock:
            return {
                "requests_total": dict(self.requests_total),
                "errors_total": dict(self.errors_total),
                "last_latency_ms": dict(self.last_latency_ms),
            }
