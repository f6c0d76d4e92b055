import os
import importlib
from fastapi.testclient import TestClient

from conftest import FakeTransliterator
from translit_bridge.core.rate_limit import RateLimiter


def setup_app():
    os.environ["API_KEY"] = "rl-key"
    os.environ["API_KEY_SECRET"] = "rl-secret"
    os.environ["CLIENT_ID"] = "rl-client"
    os.environ["RATE_LIMIT_PER_MIN"] = "1"
    import translit_bridge.core.config as config
    importlib.reload(config)
    import translit_bridge.main as main
    importlib.reload(main)
    return main.create_app(transliterator=FakeTransliterator())


def test_rate_limit_exceeded():
    client = TestClient(setup_app())
    headers = {"X-API-Key": "rl-key", "X-Client-Id": "rl-client"}
    resp1 = client.post("/api/v1/translit/batch", json={"texts": ["a"]}, headers=headers)
    assert resp1.status_code == 200
    resp2 = client.post("/api/v1/translit/batch", json={"texts": ["a"]}, headers=headers)
    assert resp2.status_code == 429


def test_window_expiry():
    limiter = RateLimiter(max_per_minute=1, window_seconds=60)
    assert limiter.allow("k")
    assert not limiter.allow("k")
    limiter.buckets["k"][0] -= 61
    assert limiter.allow("k")
