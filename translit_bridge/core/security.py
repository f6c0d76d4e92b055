import hmac
import hashlib
from typing import Dict, Optional


class ClientRegistry:
    """client_id -> HMAC of the client's API key; raw keys are never kept."""

    def __init__(self, secret: str):
        self.secret = secret.encode("utf-8")
        self._clients: Dict[str, str] = {}

    def hash_key(self, raw: str) -> str:
        return hmac.new(self.secret, raw.encode("utf-8"), hashlib.sha256).hexdigest()

    def add(self, client_id: str, api_key: str) -> None:
        self._clients[client_id] = self.hash_key(api_key)

    def get(self, client_id: str) -> Optional[str]:
        return self._clients.get(client_id)

    def verify(self, client_id: str, presented_key: str) -> bool:
        stored = self._clients.get(client_id)
        if not stored:
            return False
        return hmac.compare_digest(stored, self.hash_key(presented_key))


def build_registry(settings) -> ClientRegistry:
    registry = ClientRegistry(settings.API_KEY_SECRET)
    registry.add(settings.CLIENT_ID, settings.API_KEY)
    return registry
