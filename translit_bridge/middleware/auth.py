import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from translit_bridge.core.rate_limit import RateLimiter

PUBLIC_PATHS = {"/api/v1/health", "/docs", "/openapi.json"}


class AuthMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, client_registry, rate_limit_per_min: int = 60):
        super().__init__(app)
        self.client_registry = client_registry
        self.rate_limiter = RateLimiter(max_per_minute=rate_limit_per_min)

    async def dispatch(self, request, call_next):
        if request.url.path in PUBLIC_PATHS:
            return await call_next(request)

        client_id = request.headers.get("X-Client-Id")
        api_key = request.headers.get("X-API-Key")
        rid = getattr(request.state, "request_id", "n/a")

        if not client_id or not api_key:
            logging.error("[AUTH] request_id=%s client_id=%s reason=missing_headers", rid, client_id)
            return JSONResponse({"detail": "Unauthorized"}, status_code=401)

        if self.client_registry.get(client_id) is None:
            logging.error("[AUTH] request_id=%s client_id=%s reason=unknown_client", rid, client_id)
            return JSONResponse({"detail": "Unauthorized"}, status_code=401)

        if not self.client_registry.verify(client_id, api_key):
            logging.error("[AUTH] request_id=%s client_id=%s reason=key_mismatch", rid, client_id)
            return JSONResponse({"detail": "Unauthorized"}, status_code=401)

        if not self.rate_limiter.allow(client_id):
            logging.warning("[AUTH] request_id=%s client_id=%s reason=rate_limited", rid, client_id)
            return JSONResponse({"detail": "Rate limit exceeded"}, status_code=429)

        request.state.client_id = client_id
        return await call_next(request)
