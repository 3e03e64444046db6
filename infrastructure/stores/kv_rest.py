import logging
from typing import Any

import httpx

from domain.errors import StoreUnavailableError
from infrastructure.config.models import AppConfig, StoreBackend

from .base import ListStore
from .registry import register_store

logger = logging.getLogger(__name__)


class KvRestListStore(ListStore):
    """
    Vercel KV / Upstash Redis over the REST API.

    - Each command is POSTed to the base URL as a JSON array: ["LPUSH", key, value]
    - Auth is a bearer token
    - Replies are {"result": ...} on success and {"error": "..."} on failure
    """

    backend = StoreBackend.KV_REST

    @classmethod
    def from_cfg(cls, cfg: AppConfig) -> "KvRestListStore":
        if cfg.kv_rest is None or not cfg.kv_rest.url or not cfg.kv_rest.token:
            raise RuntimeError("kv_rest backend selected but kv_rest.url / kv_rest.token are not set")
        client = httpx.Client(
            base_url=cfg.kv_rest.url.rstrip("/"),
            timeout=cfg.kv_rest.timeout_s,
            headers={
                "Authorization": f"Bearer {cfg.kv_rest.token}",
                "Content-Type": "application/json",
            },
        )
        logger.info("Initialized KV REST store (url=%s)", cfg.kv_rest.url)
        return cls(cfg=cfg, client=client)

    def _command(self, *args: Any) -> Any:
        command = str(args[0]).upper()
        try:
            resp = self.client.post("/", json=list(args))
        except httpx.HTTPError as e:
            raise StoreUnavailableError(f"KV {command} failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise StoreUnavailableError(
                f"KV {command} returned non-JSON response (status={resp.status_code})"
            ) from e

        if resp.status_code >= 400 or not isinstance(data, dict) or "error" in data:
            detail = data.get("error") if isinstance(data, dict) else data
            raise StoreUnavailableError(f"KV {command} failed (status={resp.status_code}): {detail}")
        if "result" not in data:
            raise StoreUnavailableError(f"KV {command} reply missing 'result': {data!r}")

        logger.debug("KV %s ok (status=%d)", command, resp.status_code)
        return data["result"]

    def lpush(self, key: str, value: Any) -> int:
        return int(self._command("LPUSH", key, value))

    def ltrim(self, key: str, start: int, stop: int) -> None:
        self._command("LTRIM", key, start, stop)

    def lrange(self, key: str, start: int, stop: int) -> list[Any]:
        result = self._command("LRANGE", key, start, stop)
        if result is None:
            return []
        if not isinstance(result, list):
            raise StoreUnavailableError(f"KV LRANGE returned {type(result).__name__}, expected a list")
        return result

    def delete(self, key: str) -> int:
        return int(self._command("DEL", key) or 0)

    def close(self) -> None:
        super().close()
        self.client.close()


register_store(StoreBackend.KV_REST, KvRestListStore)
