"""Base interface for list-store backends."""

import logging
from abc import ABC, abstractmethod
from typing import Any

from infrastructure.config.models import AppConfig, StoreBackend

logger = logging.getLogger(__name__)


def resolve_range(length: int, start: int, stop: int) -> tuple[int, int]:
    """
    Convert inclusive list indices (negative counts from the end) to a slice.

    Examples:
        >>> resolve_range(5, 0, -1)
        (0, 5)
        >>> resolve_range(5, 0, 99)
        (0, 5)
        >>> resolve_range(5, 3, 1)
        (0, 0)
    """
    if start < 0:
        start = max(length + start, 0)
    if stop < 0:
        stop = length + stop
    if start > stop or start >= length:
        return 0, 0
    return start, min(stop, length - 1) + 1


class ListStore(ABC):
    """
    Abstract base class for shared ordered-list stores.
    Common interface for backends (in-memory, Vercel KV / Upstash REST, etc.).

    Semantics follow Redis lists: inclusive indices, negative indices count
    from the end, and each single operation is atomic. Multi-step sequences
    (push then trim) are not.
    """

    backend: StoreBackend
    cfg: AppConfig | None
    client: Any

    def __init__(self, *, cfg: AppConfig | None, client: Any) -> None:
        self.cfg = cfg
        self.client = client

    @abstractmethod
    def lpush(self, key: str, value: Any) -> int:
        """Prepend `value` to the list at `key`; return the new length."""
        raise NotImplementedError

    @abstractmethod
    def ltrim(self, key: str, start: int, stop: int) -> None:
        """Keep only entries start..stop (inclusive)."""
        raise NotImplementedError

    @abstractmethod
    def lrange(self, key: str, start: int, stop: int) -> list[Any]:
        """Return entries start..stop (inclusive); missing key -> []."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> int:
        """Remove the key; return the number of keys removed (0 or 1)."""
        raise NotImplementedError

    def close(self) -> None:
        """Release backend resources (no-op by default)."""
        logger.debug("Closing %s store", self.backend.value)
