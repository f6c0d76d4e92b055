"""
Caller-side client for the bridge's method channel.

Mirrors what the application shell does: it fills in the default script,
sends a ``translitBatch`` call and turns structured errors back into
exceptions.
"""
import logging
import os
import time
from typing import Any, Dict, List, Optional, Sequence

import httpx

from translit_bridge.core.errors import UnknownOperation, error_for_code
from translit_bridge.services.bridge import DEFAULT_SCRIPT
from translit_bridge.services.channel import TRANSLIT_BATCH

logger = logging.getLogger(__name__)

DEFAULT_CHANNEL = "com.ratemymantri.app/translit"


class TranslitChannelClient:
    def __init__(
        self,
        base_url: str,
        client_id: str,
        api_key: str,
        channel: str = DEFAULT_CHANNEL,
        timeout_seconds: float = 5,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.channel = channel
        self.headers = {"X-Client-Id": client_id, "X-API-Key": api_key}
        self.timeout = timeout_seconds
        self.transport = transport

    async def invoke_method(self, method: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Send one method call and return the decoded result envelope.
        Raises httpx.HTTPStatusError when the transport itself fails.
        """
        url = f"{self.base_url}/api/v1/channels/{self.channel}"
        start = time.perf_counter()
        async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), transport=self.transport) as client:
            resp = await client.post(url, json={"method": method, "arguments": arguments}, headers=self.headers)
        latency_ms = (time.perf_counter() - start) * 1000
        if resp.status_code != 200:
            logger.error(
                "[CHANNELCLIENT] event=error method=%s status=%s latency_ms=%.2f", method, resp.status_code, latency_ms
            )
            resp.raise_for_status()
        logger.info("[CHANNELCLIENT] event=ok method=%s latency_ms=%.2f", method, latency_ms)
        return resp.json()

    async def translit_batch(self, texts: Sequence[str], script: Optional[str] = None) -> List[str]:
        envelope = await self.invoke_method(
            TRANSLIT_BATCH, {"texts": list(texts), "script": DEFAULT_SCRIPT if script is None else script}
        )
        status = envelope.get("status")
        if status == "success":
            return envelope.get("result") or []
        if status == "notImplemented":
            raise UnknownOperation(f"{TRANSLIT_BATCH} is not implemented on {self.channel}")
        error = envelope.get("error") or {}
        raise error_for_code(error.get("code", ""), error.get("message"))


def build_client() -> Optional[TranslitChannelClient]:
    base = os.environ.get("TRANSLIT_BRIDGE_URL")
    if not base:
        return None
    return TranslitChannelClient(
        base_url=base,
        client_id=os.environ.get("CLIENT_ID", "demo-client"),
        api_key=os.environ.get("API_KEY", "demo-key"),
        channel=os.environ.get("TRANSLIT_CHANNEL", DEFAULT_CHANNEL),
        timeout_seconds=float(os.environ.get("TRANSLIT_BRIDGE_TIMEOUT_SECONDS", "5")),
    )
