import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware

# requests that never reached a route (unknown paths, auth rejections) share one key
UNMATCHED = "unmatched"


def route_key(request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED


class MetricsMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, metrics):
        super().__init__(app)
        self.metrics = metrics

    async def dispatch(self, request, call_next):
        rid = getattr(request.state, "request_id", "n/a")
        start = time.perf_counter()
        failed = True
        try:
            response = await call_next(request)
            failed = response.status_code >= 500
            return response
        except Exception:
            logging.exception("[METRICS] request_id=%s path=%s error", rid, request.url.path)
            raise
        finally:
            elapsed = (time.perf_counter() - start) * 1000
            key = route_key(request)
            self.metrics.record(key, elapsed, failed=failed)
            logging.info("[METRICS] request_id=%s route=%s latency_ms=%.2f failed=%s", rid, key, elapsed, failed)
