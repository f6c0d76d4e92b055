import httpx
import pytest

from conftest import FakeTransliterator
from translit_bridge.clients.channel_client import TranslitChannelClient, build_client
from translit_bridge.core.errors import TransformError, UnknownOperation, UnsupportedPlatform
from translit_bridge.core.security import ClientRegistry
from translit_bridge.services.bridge import TransliterationBridge
from translit_bridge.services.channel import MethodChannel, register_translit_handler

CHANNEL = "com.ratemymantri.app/translit"


def make_client(backend=None, register=True):
    """Client wired to an in-process app without auth middleware."""
    from fastapi import FastAPI
    from translit_bridge.api.routes import router
    from translit_bridge.core.metrics import Metrics

    app = FastAPI()
    bridge = TransliterationBridge(backend or FakeTransliterator())
    channel = MethodChannel(CHANNEL)
    if register:
        register_translit_handler(channel, bridge)
    app.state.bridge = bridge
    app.state.channel = channel
    app.state.metrics = Metrics()
    app.include_router(router, prefix="/api/v1")
    return TranslitChannelClient(
        "http://bridge.test/", "c", "k", channel=CHANNEL, transport=httpx.ASGITransport(app=app)
    )


@pytest.mark.anyio
async def test_translit_batch_substitutes_default_script():
    backend = FakeTransliterator()
    out = await make_client(backend).translit_batch(["namaste", "bharat"])
    assert out == ["Devanagari:NAMASTE", "Devanagari:BHARAT"]
    assert backend.opened == ["Latin-Devanagari"]


@pytest.mark.anyio
async def test_empty_batch():
    assert await make_client().translit_batch([], "Tamil") == []


@pytest.mark.anyio
async def test_errors_raise_matching_exception():
    with pytest.raises(TransformError):
        await make_client().translit_batch(["a"], "Klingon")
    with pytest.raises(UnsupportedPlatform):
        await make_client(FakeTransliterator(supported=False)).translit_batch(["a"])


@pytest.mark.anyio
async def test_not_implemented_raises_unknown_operation():
    with pytest.raises(UnknownOperation):
        await make_client(register=False).translit_batch(["a"])


@pytest.mark.anyio
async def test_transport_error_status_raises():
    client = make_client()
    client.channel = "missing/channel"
    with pytest.raises(httpx.HTTPStatusError):
        await client.invoke_method("translitBatch", {"texts": []})


def test_build_client_requires_url(monkeypatch):
    monkeypatch.delenv("TRANSLIT_BRIDGE_URL", raising=False)
    assert build_client() is None
    monkeypatch.setenv("TRANSLIT_BRIDGE_URL", "http://bridge:8080/")
    client = build_client()
    assert client.base_url == "http://bridge:8080"
