"""
List-store backends for the submission log.

Implements the adapter pattern for different shared-list backends:
- In-memory (local runs and tests)
- Vercel KV / Upstash REST

All stores implement the ListStore interface.
"""

from infrastructure.stores.base import ListStore
from infrastructure.stores.factory import make_store
from infrastructure.stores.kv_rest import KvRestListStore
from infrastructure.stores.memory import InMemoryListStore

__all__ = [
    # Abstract base
    "ListStore",
    # Concrete implementations
    "InMemoryListStore",
    "KvRestListStore",
    # Factory (most commonly used)
    "make_store",
]
