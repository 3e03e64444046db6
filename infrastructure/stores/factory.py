"""Factory for creating list stores."""

import logging

from infrastructure.config.models import AppConfig

from .base import ListStore
from .memory import InMemoryListStore
from .registry import get_store_class

logger = logging.getLogger(__name__)


def make_store(cfg: AppConfig, *, use_memory: bool = False) -> ListStore:
    """
    Factory function to create the configured list store.
    Args:
        cfg: App configuration containing store settings
        use_memory: If True, use the in-memory store regardless of cfg
    Returns:
        An instance of ListStore for the configured backend.
    Raises:
        RuntimeError: If no store is registered for the backend.
    """
    if use_memory:
        return InMemoryListStore.from_cfg(cfg)

    backend = cfg.store.backend
    store_cls = get_store_class(backend)
    if store_cls is None:
        raise RuntimeError(
            f"No store registered for backend '{backend.value}'. "
            f"Backend modules call register_store(...) when infrastructure.stores is imported."
        )

    logger.info("Using %s store (list_key=%s)", backend.value, cfg.store.list_key)
    return store_cls.from_cfg(cfg)  # type: ignore[attr-defined]
