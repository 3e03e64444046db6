"""Process-local list store for local runs and tests."""

import logging
import threading
from typing import Any

from infrastructure.config.models import AppConfig, StoreBackend

from .base import ListStore, resolve_range
from .registry import register_store

logger = logging.getLogger(__name__)


class InMemoryListStore(ListStore):
    """Lock-protected dict of lists. Entries may be text or already-decoded objects."""

    backend = StoreBackend.MEMORY

    def __init__(
        self,
        *,
        cfg: AppConfig | None = None,
        seed: dict[str, list[Any]] | None = None,
    ) -> None:
        super().__init__(cfg=cfg, client=None)
        self._lists: dict[str, list[Any]] = {k: list(v) for k, v in (seed or {}).items()}
        self._lock = threading.Lock()

    @classmethod
    def from_cfg(cls, cfg: AppConfig) -> "InMemoryListStore":
        seed_entries = cfg.memory.seed_entries if cfg.memory is not None else []
        seed = {cfg.store.list_key: list(seed_entries)} if seed_entries else None
        logger.info("Initialized in-memory store (data is lost on restart)")
        return cls(cfg=cfg, seed=seed)

    def lpush(self, key: str, value: Any) -> int:
        with self._lock:
            values = self._lists.setdefault(key, [])
            values.insert(0, value)
            return len(values)

    def ltrim(self, key: str, start: int, stop: int) -> None:
        with self._lock:
            values = self._lists.get(key)
            if values is None:
                return
            lo, hi = resolve_range(len(values), start, stop)
            kept = values[lo:hi]
            if kept:
                self._lists[key] = kept
            else:
                del self._lists[key]

    def lrange(self, key: str, start: int, stop: int) -> list[Any]:
        with self._lock:
            values = self._lists.get(key, [])
            lo, hi = resolve_range(len(values), start, stop)
            return list(values[lo:hi])

    def delete(self, key: str) -> int:
        with self._lock:
            return 1 if self._lists.pop(key, None) is not None else 0

    def llen(self, key: str) -> int:
        with self._lock:
            return len(self._lists.get(key, []))


register_store(StoreBackend.MEMORY, InMemoryListStore)
